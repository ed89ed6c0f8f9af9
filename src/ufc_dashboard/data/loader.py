"""Loads and parses both datasets for the dashboard."""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from .client import DataLoadError, DatasetClient
from .models import FightRecord, FighterRecord
from .parsers import parse_fight_csv, parse_fighter_csv

# Default data directory (relative to project root)
DEFAULT_DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"
DEFAULT_FIGHTS_SOURCE = str(DEFAULT_DATA_DIR / "fight_details.csv")
DEFAULT_FIGHTERS_SOURCE = str(DEFAULT_DATA_DIR / "fighter_details.csv")

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


class LoadStatus(Enum):
    """Lifecycle of a dashboard load."""

    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass
class Dataset:
    """Parsed fight and fighter collections from one load cycle."""

    fights: list[FightRecord] = field(default_factory=list)
    fighters: list[FighterRecord] = field(default_factory=list)
    skipped_fights: int = 0
    skipped_fighters: int = 0


@dataclass
class LoadState:
    """Outcome of a load attempt, as shown to the user."""

    status: LoadStatus = LoadStatus.LOADING
    dataset: Optional[Dataset] = None
    error: Optional[str] = None

    @property
    def is_ready(self) -> bool:
        return self.status == LoadStatus.READY


class DashboardLoader:
    """Fetches both CSV resources concurrently and parses them."""

    def __init__(
        self,
        fights_source: str = DEFAULT_FIGHTS_SOURCE,
        fighters_source: str = DEFAULT_FIGHTERS_SOURCE,
        client: Optional[DatasetClient] = None,
    ):
        """Initialize loader with dataset sources and a client."""
        self.fights_source = fights_source
        self.fighters_source = fighters_source
        self.client = client or DatasetClient()

    def fetch_all(self) -> tuple[str, str]:
        """
        Fetch the raw text of both datasets in parallel.

        Returns:
            Tuple of (fight_text, fighter_text)

        Raises:
            DataLoadError: If either fetch fails
        """
        logger.info("Loading CSV files...")
        with ThreadPoolExecutor(max_workers=2) as executor:
            fights_future = executor.submit(
                self.client.fetch, self.fights_source, "fight details"
            )
            fighters_future = executor.submit(
                self.client.fetch, self.fighters_source, "fighter details"
            )
            fight_text = fights_future.result()
            fighter_text = fighters_future.result()

        logger.info(
            f"CSV files loaded: {len(fight_text)} chars of fights, "
            f"{len(fighter_text)} chars of fighters"
        )
        return fight_text, fighter_text

    def load(self) -> Dataset:
        """
        Fetch and parse both datasets.

        Raises:
            DataLoadError: If either resource cannot be fetched
        """
        fight_text, fighter_text = self.fetch_all()

        fights = parse_fight_csv(fight_text)
        fighters = parse_fighter_csv(fighter_text)

        return Dataset(
            fights=fights.records,
            fighters=fighters.records,
            skipped_fights=fights.skipped,
            skipped_fighters=fighters.skipped,
        )

    def load_state(self) -> LoadState:
        """Load both datasets, reporting failures as an error state."""
        try:
            dataset = self.load()
        except DataLoadError as e:
            logger.error(f"Error loading data: {e}")
            return LoadState(status=LoadStatus.ERROR, error=str(e))
        return LoadState(status=LoadStatus.READY, dataset=dataset)

"""CSV ingestion for the fight and fighter datasets."""

from .client import DataLoadError, DatasetClient
from .coercion import to_int, to_number
from .loader import Dataset, DashboardLoader, LoadState, LoadStatus
from .models import FightRecord, FighterRecord, ParseResult
from .parsers import parse_fight_csv, parse_fighter_csv

__all__ = [
    "FightRecord",
    "FighterRecord",
    "ParseResult",
    "to_number",
    "to_int",
    "parse_fight_csv",
    "parse_fighter_csv",
    "DatasetClient",
    "DataLoadError",
    "Dataset",
    "DashboardLoader",
    "LoadState",
    "LoadStatus",
]

"""View-model types produced by the aggregation engine."""

from dataclasses import asdict, dataclass, field

from ..data.models import FighterRecord

# Filter sentinel meaning "no restriction"
ALL = "all"

# Curated filter options shown in the UI
MAIN_DIVISIONS = [
    "lightweight",
    "welterweight",
    "middleweight",
    "featherweight",
    "heavyweight",
    "bantamweight",
    "light heavyweight",
    "flyweight",
]
MAIN_METHODS = [
    "Submission",
    "KO/TKO",
    "Decision - Unanimous",
    "Decision - Split",
    "Decision - Majority",
]

# Method strings counted per division
SUBMISSION = "Submission"
KNOCKOUT = "KO/TKO"
DECISION = "Decision"  # Matched as a substring

# Ranking thresholds
MIN_DIVISION_FIGHTS = 50  # Divisions need strictly more fights than this
MAX_DIVISIONS = 10
MAX_TOP_FIGHTERS = 15
MIN_ACCURACY_FIGHTS = 5
MAX_ACCURACY_POINTS = 100
MIN_WIN_RATE_FIGHTS = 10


@dataclass(frozen=True)
class MethodCount:
    """Occurrences of one finishing method."""

    method: str
    count: int


@dataclass(frozen=True)
class DivisionSummary:
    """Outcome breakdown for a division."""

    division: str
    count: int
    submissions: int
    knockouts: int
    decisions: int
    submission_rate: str  # Percent, one decimal, e.g. "42.3"
    knockout_rate: str
    decision_rate: str


@dataclass(frozen=True)
class FighterSummary:
    """A fighter with career totals derived from the record."""

    fighter: FighterRecord
    total_fights: int
    win_rate: float  # 0-100

    @property
    def name(self) -> str:
        return self.fighter.name

    @property
    def wins(self) -> int:
        return self.fighter.wins

    @property
    def str_acc(self) -> float:
        return self.fighter.str_acc

    def to_dict(self) -> dict:
        data = asdict(self.fighter)
        data["total_fights"] = self.total_fights
        data["win_rate"] = self.win_rate
        return data


@dataclass(frozen=True)
class AccuracyPoint:
    """One point of the striking accuracy vs win rate scatter."""

    name: str
    accuracy: float
    win_rate: float
    total_fights: int


@dataclass
class DashboardData:
    """Everything the dashboard renders for one filter selection."""

    method_data: list[MethodCount] = field(default_factory=list)
    division_data: list[DivisionSummary] = field(default_factory=list)
    top_fighters: list[FighterSummary] = field(default_factory=list)
    top_win_rate_fighters: list[FighterSummary] = field(default_factory=list)
    accuracy_data: list[AccuracyPoint] = field(default_factory=list)
    total_fights: int = 0
    title_fights: int = 0
    finish_rate: str = "0.0"
    total_fighters: int = 0

    @classmethod
    def empty(cls) -> "DashboardData":
        """View-model for the not-yet-loaded state."""
        return cls()

    @property
    def decision_count(self) -> int:
        """Fights for the most common decision method, or 0."""
        for entry in self.method_data:
            if DECISION in entry.method:
                return entry.count
        return 0

    @property
    def is_empty(self) -> bool:
        return self.total_fighters == 0 and not self.division_data and not self.method_data

    def to_dict(self) -> dict:
        return {
            "method_data": [asdict(m) for m in self.method_data],
            "division_data": [asdict(d) for d in self.division_data],
            "top_fighters": [f.to_dict() for f in self.top_fighters],
            "top_win_rate_fighters": [f.to_dict() for f in self.top_win_rate_fighters],
            "accuracy_data": [asdict(p) for p in self.accuracy_data],
            "total_fights": self.total_fights,
            "title_fights": self.title_fights,
            "finish_rate": self.finish_rate,
            "total_fighters": self.total_fighters,
        }

"""Data models for the fight and fighter datasets."""

from dataclasses import dataclass, field
from typing import Optional, Sequence

from .coercion import to_int, to_number

# Minimum positional columns for a row to be accepted
FIGHTER_COLUMNS = 19
FIGHT_COLUMNS = 12


@dataclass(frozen=True)
class FighterRecord:
    """Career profile of a single fighter."""

    fighter_id: str
    name: str
    nickname: str = ""
    wins: int = 0
    losses: int = 0
    draws: int = 0
    height: float = 0.0
    weight: float = 0.0
    reach: float = 0.0
    stance: str = ""  # Orthodox, Southpaw, Switch
    dob: str = ""
    slpm: float = 0.0  # Significant strikes landed per minute
    str_acc: float = 0.0  # Striking accuracy %
    sapm: float = 0.0  # Significant strikes absorbed per minute
    str_def: float = 0.0  # Striking defense %
    td_avg: float = 0.0  # Takedowns per 15 min
    td_acc: float = 0.0  # Takedown accuracy %
    td_def: float = 0.0  # Takedown defense %
    sub_avg: float = 0.0  # Submissions per 15 min

    @property
    def record(self) -> str:
        return f"{self.wins}-{self.losses}-{self.draws}"

    @classmethod
    def from_row(cls, values: Sequence[str]) -> Optional["FighterRecord"]:
        """
        Build a fighter from positional CSV values.

        Returns None when the row has fewer than FIGHTER_COLUMNS values.
        """
        if len(values) < FIGHTER_COLUMNS:
            return None
        return cls(
            fighter_id=values[0],
            name=values[1],
            nickname=values[2],
            wins=to_int(values[3]),
            losses=to_int(values[4]),
            draws=to_int(values[5]),
            height=to_number(values[6]),
            weight=to_number(values[7]),
            reach=to_number(values[8]),
            stance=values[9],
            dob=values[10],
            slpm=to_number(values[11]),
            str_acc=to_number(values[12]),
            sapm=to_number(values[13]),
            str_def=to_number(values[14]),
            td_avg=to_number(values[15]),
            td_acc=to_number(values[16]),
            td_def=to_number(values[17]),
            sub_avg=to_number(values[18]),
        )


@dataclass(frozen=True)
class FightRecord:
    """A single UFC fight."""

    event_name: str
    event_id: str
    fight_id: str
    red_name: str = ""
    red_id: str = ""
    blue_name: str = ""
    blue_id: str = ""
    division: str = ""  # Case-sensitive, e.g. "lightweight"
    title_fight: int = 0  # 1 for title fights, 0 otherwise
    method: str = ""  # KO/TKO, Submission, Decision - Unanimous, etc.
    finish_round: int = 0
    match_time_sec: int = 0

    @property
    def is_title_fight(self) -> bool:
        return self.title_fight == 1

    @classmethod
    def from_row(cls, values: Sequence[str]) -> Optional["FightRecord"]:
        """
        Build a fight from positional CSV values.

        Returns None when the row has fewer than FIGHT_COLUMNS values.
        """
        if len(values) < FIGHT_COLUMNS:
            return None
        return cls(
            event_name=values[0],
            event_id=values[1],
            fight_id=values[2],
            red_name=values[3],
            red_id=values[4],
            blue_name=values[5],
            blue_id=values[6],
            division=values[7],
            title_fight=to_int(values[8]),
            method=values[9],
            finish_round=to_int(values[10]),
            match_time_sec=to_int(values[11]),
        )


@dataclass
class ParseResult:
    """Records parsed from one CSV resource."""

    records: list = field(default_factory=list)
    skipped: int = 0  # Rows dropped for too few columns or open quotes

    def __len__(self) -> int:
        return len(self.records)

"""CSV parsers for the fight and fighter datasets."""

import logging

from .coercion import to_int, to_number
from .models import FightRecord, FighterRecord, ParseResult

logger = logging.getLogger(__name__)

__all__ = [
    "parse_fight_csv",
    "parse_fighter_csv",
    "split_row",
    "to_int",
    "to_number",
]


def _clean_field(value: str) -> str:
    """Strip whitespace and one pair of enclosing double quotes."""
    value = value.strip()
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value


def split_row(line: str) -> list[str]:
    """Split a logical CSV line on commas and clean each field."""
    return [_clean_field(value) for value in line.split(",")]


def _check_text(content: str) -> None:
    if not isinstance(content, str):
        raise TypeError(f"CSV content must be str, got {type(content).__name__}")


# -----------------------------------------------------------------------------
# Fighters
# -----------------------------------------------------------------------------


def parse_fighter_csv(content: str) -> ParseResult:
    """
    Parse the fighter dataset.

    The first line is a header and is ignored; columns are positional.
    Rows with fewer than 19 fields are skipped.

    Args:
        content: Full CSV text

    Returns:
        ParseResult with FighterRecord objects in source order
    """
    _check_text(content)
    result = ParseResult()

    for line in content.split("\n")[1:]:
        line = line.strip()
        if not line:
            continue

        fighter = FighterRecord.from_row(split_row(line))
        if fighter is None:
            result.skipped += 1
            logger.debug(f"Skipping fighter line: {line[:80]!r}")
            continue
        result.records.append(fighter)

    logger.info(f"Parsed {len(result.records)} fighters ({result.skipped} rows skipped)")
    return result


# -----------------------------------------------------------------------------
# Fights
# -----------------------------------------------------------------------------


class _LogicalLineReader:
    """Joins physical lines until every opened double quote is closed."""

    def __init__(self):
        self.in_quotes = False
        self._pending: list[str] = []

    def feed(self, line: str):
        """
        Add a physical line.

        Returns the completed logical line, or None while a quote is open
        or nothing but blank lines has been read.
        """
        if line.count('"') % 2 == 1:
            self.in_quotes = not self.in_quotes
        self._pending.append(line)

        if self.in_quotes:
            return None

        logical = "\n".join(self._pending)
        if not logical.strip():
            return None
        self._pending = []
        return logical

    @property
    def has_pending(self) -> bool:
        return bool("".join(self._pending).strip())


def parse_fight_csv(content: str) -> ParseResult:
    """
    Parse the fight dataset.

    Quoted fields may span several physical lines; those lines are joined
    back into one record. Rows with fewer than 12 fields are skipped, as is
    any quoted content still open at the end of the input.

    Args:
        content: Full CSV text

    Returns:
        ParseResult with FightRecord objects in source order
    """
    _check_text(content)
    result = ParseResult()
    reader = _LogicalLineReader()

    for line in content.split("\n")[1:]:
        logical = reader.feed(line)
        if logical is None:
            continue

        fight = FightRecord.from_row(split_row(logical))
        if fight is None:
            result.skipped += 1
            logger.debug(f"Skipping fight line: {logical[:80]!r}")
            continue
        result.records.append(fight)

    if reader.in_quotes and reader.has_pending:
        result.skipped += 1
        logger.warning("Fight data ends inside an unterminated quoted field")

    logger.info(f"Parsed {len(result.records)} fights ({result.skipped} rows skipped)")
    return result

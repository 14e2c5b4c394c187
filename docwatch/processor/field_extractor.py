import re
from collections.abc import Sequence
from dataclasses import dataclass

from docwatch.logging.logger import Log
from docwatch.processor.models import NOT_AVAILABLE, ExtractionResult


@dataclass(frozen=True)
class FieldPattern:
    """A named pattern whose ``value`` group holds the field's raw text."""

    name: str
    regex: re.Pattern[str]

    def __post_init__(self) -> None:
        if "value" not in self.regex.groupindex:
            raise ValueError(f"Pattern for '{self.name}' must define a 'value' group")

    def first_match(self, text: str) -> str | None:
        match = self.regex.search(text)
        if match is None:
            return None
        return match.group("value") or None


SUM_PATTERN = re.compile(
    r'(?:סה["״]?כ\s+בשח:\s*|(?:סה["״]?כ\s+)?לתשלום:?)\s+(?P<value>\d+(?:[.,]\d+)?)'
)

NUM_PATTERN = re.compile(r"חשבונית מס/קבלה\D*(?P<value>\d+)")

# 29 is valid for any month but February; for February only in leap years
# (Gregorian rule on 4-digit years, divisible-by-4 on 2-digit years).
DATE_PATTERN = re.compile(
    r"""
    (?P<value>
        (?:
            0[1-9] | 1\d | 2[0-8]
          | 29(?=
                [/.](?:0[13-9]|1[0-2])[/.]
              | [/.]02[/.](?:
                    (?!1[01345789]00|2[1235679]00)[12]\d(?:[02468][048]|[13579][26])(?!\d)
                  | (?:[02468][048]|[13579][26])(?!\d)
                )
            )
          | 30(?![/.]02)
          | 31(?=[/.](?:0[13578]|1[02]))
        )
        [/.]
        (?:0[1-9]|1[0-2])
        [/.]
        (?:[12]\d{3}|\d{2})
    )
    """,
    re.VERBOSE,
)

DEFAULT_PATTERNS: tuple[FieldPattern, ...] = (
    FieldPattern("sum", SUM_PATTERN),
    FieldPattern("num", NUM_PATTERN),
    FieldPattern("date", DATE_PATTERN),
)


def extract_fields(
    text: str,
    patterns: Sequence[FieldPattern] = DEFAULT_PATTERNS,
) -> ExtractionResult:
    """Map every pattern name to its first match in text, or "N/A"."""
    extracted: ExtractionResult = {}
    for pattern in patterns:
        value = pattern.first_match(text)
        if value is None:
            Log.debug(f"No match found for {pattern.name}")
            extracted[pattern.name] = NOT_AVAILABLE
        else:
            Log.debug(f"Found match for {pattern.name}: {value}")
            extracted[pattern.name] = value
    return extracted


class FieldExtractor:
    """Runs a fixed pattern set against document text."""

    def __init__(self, patterns: Sequence[FieldPattern] = DEFAULT_PATTERNS) -> None:
        self._patterns = tuple(patterns)

    def extract(self, text: str) -> ExtractionResult:
        return extract_fields(text, self._patterns)

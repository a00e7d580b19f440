"""
Locale conventions used by the display formatters.

The magnitude suffixes, date/time widths and the truncation notice are
regional conventions rather than logic, so they live together in one
LocaleProfile. Call sites pass ``profile=`` to swap them out.
"""

from dataclasses import dataclass, field
from datetime import tzinfo
from typing import Tuple

from babel import Locale, UnknownLocaleError

from config.settings import Settings

MagnitudeUnits = Tuple[Tuple[int, str], ...]

# Largest threshold first
CJK_MAGNITUDE_UNITS: MagnitudeUnits = (
    (100_000_000, "亿"),
    (10_000, "万"),
)

TRUNCATION_NOTICE = "(输出过长，已截断)"

BABEL_WIDTHS = {"short", "medium", "long", "full"}


@dataclass(frozen=True)
class LocaleProfile:
    """
    Formatting policy for one region.

    Attributes:
        locale: Babel locale identifier, e.g. "zh_CN"
        date_format: Babel date width ("short", "medium", "long", "full")
        time_format: Babel time width
        magnitude_units: (threshold, suffix) pairs, largest threshold first
        truncation_notice: Text shown after the ellipsis line of trimmed output
        timezone: pytz timezone timestamps are rendered in
    """

    locale: str = Settings.FORMAT_LOCALE
    date_format: str = "medium"
    time_format: str = "short"
    magnitude_units: MagnitudeUnits = CJK_MAGNITUDE_UNITS
    truncation_notice: str = TRUNCATION_NOTICE
    timezone: tzinfo = field(default=Settings.SERVER_TZ)

    def __post_init__(self) -> None:
        try:
            Locale.parse(self.locale)
        except (UnknownLocaleError, ValueError) as e:
            raise ValueError(f"Unsupported locale '{self.locale}': {e}") from e

        for width in (self.date_format, self.time_format):
            if width not in BABEL_WIDTHS:
                raise ValueError(f"Unknown date/time width '{width}', expected one of {sorted(BABEL_WIDTHS)}")

        thresholds = [threshold for threshold, _ in self.magnitude_units]
        if any(t <= 0 for t in thresholds) or thresholds != sorted(thresholds, reverse=True):
            raise ValueError("magnitude_units must be positive thresholds in descending order")

    @property
    def truncation_marker(self) -> str:
        return "\n...\n" + self.truncation_notice


DEFAULT_PROFILE = LocaleProfile()

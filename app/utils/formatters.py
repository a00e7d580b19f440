"""
Utility functions for turning raw values into display strings.

- format_number: large counts with 万/亿 magnitude suffixes.
- format_duration: elapsed seconds as H:MM:SS or M:SS.
- format_date: unix timestamp as a localized medium date + short time.
- format_json_output: raw JSON bytes re-indented with sorted keys (None if invalid).
- pretty_json: structured value as indented JSON, falling back to str(value).
- trimmed_output: grapheme-aware truncation with a fixed marker.
"""

import base64
import json
import logging
import numbers
from dataclasses import fields, is_dataclass
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Union
from uuid import UUID

import regex
from babel.dates import format_date as babel_format_date
from babel.dates import format_time as babel_format_time
from babel.dates import get_datetime_format

from config.settings import Settings
from .locale_profile import DEFAULT_PROFILE, LocaleProfile

logger = logging.getLogger(__name__)

MAX_OUTPUT_LENGTH = Settings.MAX_OUTPUT_LENGTH
TRUNCATION_MARKER = DEFAULT_PROFILE.truncation_marker

# Extended grapheme cluster (user-perceived character)
_GRAPHEME = regex.compile(r"\X")

JSONBytes = Union[bytes, bytearray, memoryview, str]


def format_number(number: int, profile: Optional[LocaleProfile] = None) -> str:
    """
    Format a count with the largest matching magnitude suffix.

    Example:
      format_number(9999)      -> "9999"
      format_number(123456)    -> "12.3万"
      format_number(100000000) -> "1.0亿"

    Negative counts keep their sign and are scaled like positive ones
    (-123456 -> "-12.3万").
    """
    if isinstance(number, bool) or not isinstance(number, numbers.Integral):
        raise TypeError(f"format_number expects an integer, got {type(number).__name__}")

    profile = profile or DEFAULT_PROFILE
    magnitude = abs(int(number))
    sign = "-" if number < 0 else ""

    for threshold, suffix in profile.magnitude_units:
        if magnitude >= threshold:
            return f"{sign}{magnitude / threshold:.1f}{suffix}"
    return str(int(number))


def format_duration(seconds: int) -> str:
    """Format elapsed seconds as H:MM:SS, or M:SS when under an hour. Negative input counts as zero."""
    if seconds < 0:
        logger.warning(f"Negative duration {seconds}s clamped to 0")
        seconds = 0

    seconds = int(seconds)
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_date(timestamp: Union[int, float], profile: Optional[LocaleProfile] = None) -> str:
    """
    Format a unix timestamp for display in the profile's locale and timezone.

    Uses the locale's own date-time glue pattern, so zh_CN renders
    medium date + short time as "2024年1月15日 14:30".

    Raises:
        OverflowError, ValueError, OSError: timestamp outside the platform's datetime range
    """
    profile = profile or DEFAULT_PROFILE
    dt = datetime.fromtimestamp(timestamp, tz=profile.timezone)

    date_part = babel_format_date(dt, format=profile.date_format, locale=profile.locale)
    time_part = babel_format_time(dt, format=profile.time_format, tzinfo=profile.timezone, locale=profile.locale)
    pattern = get_datetime_format(profile.date_format, locale=profile.locale)

    return (
        str(pattern)
        .replace("'", "")
        .replace("{0}", time_part)
        .replace("{1}", date_part)
    )


def _dump(value: Any) -> str:
    # Single canonical layout shared by both JSON formatters
    return json.dumps(
        value,
        indent=2,
        sort_keys=True,
        ensure_ascii=False,
        allow_nan=False,
    )


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant '{name}'")


def format_json_output(data: JSONBytes, allow_fragments: bool = False) -> Optional[str]:
    """
    Re-indent raw JSON text with sorted keys.

    Malformed input is an expected case here: invalid JSON, invalid UTF-8,
    NaN/Infinity literals and (unless allow_fragments) a bare top-level
    scalar all yield None instead of raising.

    Args:
        data: UTF-8 encoded JSON (bytes-like) or already-decoded text
        allow_fragments: Accept a top-level string/number/bool/null

    Returns:
        Indented JSON string, or None when the input is not valid JSON

    Raises:
        TypeError: If data is not bytes-like or str
    """
    if isinstance(data, (bytearray, memoryview)):
        data = bytes(data)
    if not isinstance(data, (bytes, str)):
        raise TypeError(f"format_json_output expects bytes, got {type(data).__name__}")

    try:
        parsed = json.loads(data, parse_constant=_reject_constant)
        if not allow_fragments and not isinstance(parsed, (dict, list)):
            raise ValueError(f"Top-level JSON {type(parsed).__name__} is not an object or array")
        return _dump(parsed)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueError
        logger.debug(f"Not valid JSON ({type(data).__name__}, length {len(data)}): {e}")
        return None


def _localize(dt: datetime) -> datetime:
    if dt.tzinfo is not None:
        return dt
    tz = Settings.SERVER_TZ
    # pytz-style timezone (has .localize) vs zoneinfo (no .localize)
    if hasattr(tz, "localize"):
        return tz.localize(dt)
    return dt.replace(tzinfo=tz)


def _epoch_seconds(dt: datetime) -> Union[int, float]:
    seconds = _localize(dt).timestamp()
    return int(seconds) if seconds.is_integer() else seconds


def _encode_default(obj: Any) -> Any:
    """Convert a value the stdlib encoder does not know into one it does."""
    if isinstance(obj, datetime):
        return _epoch_seconds(obj)
    if isinstance(obj, date):
        return _epoch_seconds(datetime.combine(obj, time.min))
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, Decimal):
        return int(obj) if obj == obj.to_integral_value() else float(obj)
    if isinstance(obj, UUID):
        return str(obj)
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return base64.b64encode(obj).decode("ascii")
    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in fields(obj)}
    for method in ("model_dump", "to_dict"):
        if callable(getattr(obj, method, None)):
            return getattr(obj, method)()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _json_key(key: Any) -> str:
    """Object key as JSON text sees it, so sorting is by key name."""
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, (bool, int, float)):
        return json.dumps(key, allow_nan=False)
    encoded = _encode_default(key)
    if encoded is None or isinstance(encoded, (str, bool, int, float)):
        return _json_key(encoded)
    raise TypeError(f"Keys of type {type(key).__name__} cannot be JSON object keys")


def _to_plain(obj: Any, active: set) -> Any:
    """
    Rebuild obj from dicts with string keys, lists and scalars only.

    `active` holds the ids of the containers on the current path and
    catches circular references.
    """
    if obj is None or isinstance(obj, (str, bool, int, float)):
        return obj

    if isinstance(obj, (dict, list, tuple, set, frozenset)):
        if id(obj) in active:
            raise ValueError("Circular reference detected")
        active.add(id(obj))
        try:
            if isinstance(obj, dict):
                return {_json_key(k): _to_plain(v, active) for k, v in obj.items()}
            items = [_to_plain(v, active) for v in obj]
        finally:
            active.discard(id(obj))

        if isinstance(obj, (set, frozenset)):
            # Sets have no order of their own; fall back to the encoded text
            # when members do not compare (enums, records, mixed types)
            try:
                return sorted(items)
            except TypeError:
                return sorted(items, key=_dump)
        return items

    return _to_plain(_encode_default(obj), active)


def pretty_json(value: Any) -> str:
    """
    Encode a structured value as indented JSON with sorted keys.

    Datetimes become seconds since the epoch (naive ones are read in
    Settings.SERVER_TZ); dataclasses, enums, decimals, UUIDs, sets and
    bytes (base64) are converted as well. Non-string dict keys become their
    JSON key text before sorting, so output matches format_json_output.
    Unlike format_json_output this never returns None: anything that
    cannot be encoded falls back to str(value).
    """
    try:
        return _dump(_to_plain(value, set()))
    except Exception as e:
        logger.debug(f"Failed to encode {type(value).__name__} as JSON: {e}")
        return str(value)


def trimmed_output(
    text: str,
    limit: int = MAX_OUTPUT_LENGTH,
    profile: Optional[LocaleProfile] = None
) -> str:
    """
    Cut text to at most `limit` user-perceived characters.

    Counting is by extended grapheme cluster, so CJK text, combining marks
    and emoji sequences are never split. Text over the limit gets the
    profile's truncation marker appended:

      "<first limit characters>\\n...\\n(输出过长，已截断)"

    Raises:
        ValueError: If limit is negative
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    # A string never has more graphemes than code points
    if len(text) <= limit:
        return text

    profile = profile or DEFAULT_PROFILE
    end = 0
    for count, match in enumerate(_GRAPHEME.finditer(text), start=1):
        if count > limit:
            return text[:end] + profile.truncation_marker
        end = match.end()
    return text

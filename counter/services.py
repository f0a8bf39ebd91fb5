# counter/services.py
from typing import Optional
from urllib.parse import urlencode

from settings_data.models import DEFAULT_COUNT
from settings_data.services import MissingSettingError, get_setting_int

from .exceptions import InvalidCounterInput, MissingDefaultError

# Counts are stored in a signed 64-bit column
COUNT_MIN = -2**63
COUNT_MAX = 2**63 - 1


def check_count(count: int) -> int:
    if not COUNT_MIN <= count <= COUNT_MAX:
        raise InvalidCounterInput(f"{count} is outside the range {COUNT_MIN}..{COUNT_MAX}")
    return count


def resolve_count(count: Optional[int] = None) -> int:
    if count is not None:
        return count
    try:
        return get_setting_int(DEFAULT_COUNT)
    except MissingSettingError as e:
        raise MissingDefaultError(e.name) from e


def parse_count(raw, required=False) -> Optional[int]:
    """Parse a count from request data.

    Unparseable, out of range or missing values give None, unless ``required``
    is set, in which case they raise InvalidCounterInput.
    """
    if raw is not None:
        try:
            value = int(raw)
        except (TypeError, ValueError):
            value = None
        if value is not None:
            if required:
                return check_count(value)
            if COUNT_MIN <= value <= COUNT_MAX:
                return value
    if required:
        raise InvalidCounterInput(f"{raw!r} is not a valid count")
    return None


def counter_url(base_path: str, count: Optional[int] = None) -> str:
    """Build the counter URL under ``base_path``, the path the resource is mounted at."""
    if count is None:
        return base_path
    return f"{base_path}?{urlencode({'count': count})}"

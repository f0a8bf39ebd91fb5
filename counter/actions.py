# counter/actions.py
import enum
from dataclasses import dataclass
from typing import Optional

from settings_data.models import DEFAULT_COUNT
from settings_data.services import set_setting_int

from .exceptions import InvalidActionError
from .services import check_count, resolve_count


class CounterAction(str, enum.Enum):
    INC = 'inc'
    DEC = 'dec'
    DEFAULT = 'default'
    SET_DEFAULT = 'set-default'

    @classmethod
    def parse(cls, label):
        try:
            return cls(label)
        except ValueError:
            raise InvalidActionError(label) from None


# Button order on the page
ACTION_CHOICES = [
    (CounterAction.DEC, '-'),
    (CounterAction.INC, '+'),
    (CounterAction.DEFAULT, 'Reset'),
    (CounterAction.SET_DEFAULT, 'Set as default'),
]


STEPS = {
    CounterAction.INC: 1,
    CounterAction.DEC: -1,
}


@dataclass(frozen=True)
class CounterResult:
    # None means the next read resolves the count from the stored default
    count: Optional[int]
    query_count: Optional[int]

    def resolved_count(self) -> int:
        if self.count is None:
            return resolve_count()
        return self.count


def apply_action(count: int, action) -> CounterResult:
    """Compute the outcome of ``action`` on ``count``.

    Only ``set-default`` writes to the store. ``default`` defers the read of
    the stored value to whoever renders the result, so a redirecting caller
    never touches the database here.
    """
    if not isinstance(action, CounterAction):
        action = CounterAction.parse(action)

    if action in STEPS:
        next_count = check_count(count + STEPS[action])
        return CounterResult(count=next_count, query_count=next_count)
    if action is CounterAction.DEFAULT:
        return CounterResult(count=None, query_count=None)
    set_setting_int(DEFAULT_COUNT, check_count(count))
    return CounterResult(count=count, query_count=None)

# counter/exceptions.py
from settings_data.services import MissingSettingError


class CounterError(Exception):
    """Base class for failures reported while handling the counter."""


class InvalidActionError(CounterError, ValueError):
    def __init__(self, action):
        self.action = action
        super().__init__(f"{action} is not a valid action")


class InvalidCounterInput(CounterError, ValueError):
    pass


class MissingDefaultError(CounterError, MissingSettingError):
    pass

# settings_data/services.py
from .models import SettingsInt


class MissingSettingError(LookupError):
    """Raised when a required integer setting has no stored value."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"No `{name}` in database")


def get_setting_int(name: str) -> int:
    value = SettingsInt.objects.filter(name=name).values_list('value', flat=True).first()
    if value is None:
        raise MissingSettingError(name)
    return value


def set_setting_int(name: str, value: int) -> int:
    """Overwrite an existing setting in place. Returns the number of rows updated."""
    return SettingsInt.objects.filter(name=name).update(value=value)

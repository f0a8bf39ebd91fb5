import pytest

from settings_data.models import DEFAULT_COUNT, SettingsInt


@pytest.fixture
def default_count(db):
    """Set the stored default and return a setter for later changes."""
    def set_default(value):
        SettingsInt.objects.update_or_create(name=DEFAULT_COUNT, defaults={'value': value})
        return value
    return set_default


@pytest.fixture
def empty_settings(db):
    SettingsInt.objects.all().delete()


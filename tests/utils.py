from settings_data.models import DEFAULT_COUNT, SettingsInt


def stored_default():
    return SettingsInt.objects.get(name=DEFAULT_COUNT).value

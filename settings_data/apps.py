from django.apps import AppConfig


class SettingsDataConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'settings_data'
    verbose_name = 'Settings'

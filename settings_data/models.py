# settings_data/models.py
from django.db import models

DEFAULT_COUNT = 'DefaultCount'


class SettingsInt(models.Model):
    name = models.CharField(max_length=100, unique=True)
    value = models.BigIntegerField(null=True, blank=True)

    class Meta:
        db_table = 'SettingsInt'
        verbose_name = 'integer setting'
        ordering = ['name']

    def __str__(self):
        return f"{self.name} = {self.value}"

# settings_data/admin.py
from django.contrib import admin
from .models import SettingsInt

@admin.register(SettingsInt)
class SettingsIntAdmin(admin.ModelAdmin):
    list_display = ('name', 'value')
    search_fields = ('name',)

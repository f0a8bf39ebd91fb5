from rest_framework import serializers
from .models import SettingsInt

class SettingsIntSerializer(serializers.ModelSerializer):
    class Meta:
        model = SettingsInt
        fields = ['name', 'value']
        read_only_fields = ['name']

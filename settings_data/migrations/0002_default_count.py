from django.db import migrations


def create_default_count(apps, schema_editor):
    SettingsInt = apps.get_model('settings_data', 'SettingsInt')
    SettingsInt.objects.get_or_create(name='DefaultCount', defaults={'value': 0})


def remove_default_count(apps, schema_editor):
    SettingsInt = apps.get_model('settings_data', 'SettingsInt')
    SettingsInt.objects.filter(name='DefaultCount').delete()


class Migration(migrations.Migration):

    dependencies = [
        ('settings_data', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(create_default_count, remove_default_count),
    ]

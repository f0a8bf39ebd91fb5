from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='SettingsInt',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, unique=True)),
                ('value', models.BigIntegerField(blank=True, null=True)),
            ],
            options={
                'verbose_name': 'integer setting',
                'db_table': 'SettingsInt',
                'ordering': ['name'],
            },
        ),
    ]

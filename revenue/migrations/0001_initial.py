import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('identity', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='RevenueStream',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('source', models.CharField(choices=[('streaming', 'Streaming'), ('physical_sales', 'Ventes physiques'), ('digital_sales', 'Ventes numériques'), ('live_performance', 'Concerts'), ('merchandise', 'Merchandising'), ('sync_licensing', 'Synchronisation'), ('publishing', 'Édition'), ('sponsorship', 'Parrainage'), ('other', 'Autre')], max_length=30)),
                ('platform', models.CharField(blank=True, help_text='Platform/service name (e.g., Spotify, Apple Music, Bandcamp)', max_length=100)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(0)])),
                ('currency', models.CharField(choices=[('EUR', 'EUR'), ('USD', 'USD'), ('GBP', 'GBP'), ('CAD', 'CAD'), ('AUD', 'AUD'), ('JPY', 'JPY')], default='EUR', max_length=3)),
                ('date', models.DateField(help_text='Date when the revenue was generated')),
                ('description', models.TextField(blank=True, validators=[django.core.validators.MaxLengthValidator(500)])),
                ('metadata', models.JSONField(blank=True, default=dict, help_text='Additional data like stream counts, track info, venue details')),
                ('is_recurring', models.BooleanField(default=False)),
                ('recurring_period', models.CharField(blank=True, choices=[('daily', 'Daily'), ('weekly', 'Weekly'), ('monthly', 'Monthly'), ('quarterly', 'Quarterly'), ('yearly', 'Yearly')], max_length=20, null=True)),
                ('contract_id', models.CharField(blank=True, max_length=100)),
                ('taxable', models.BooleanField(default=True)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('confirmed', 'Confirmed'), ('disputed', 'Disputed'), ('cancelled', 'Cancelled')], default='pending', max_length=20)),
                ('payout_date', models.DateField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('artist', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='revenue_streams', to='identity.artist')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='created_revenue_streams', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Revenue Stream',
                'verbose_name_plural': 'Revenue Streams',
                'ordering': ['-date', '-created_at'],
                'indexes': [
                    models.Index(fields=['artist', 'date'], name='revenue_rev_artist__5c6d7e_idx'),
                    models.Index(fields=['artist', 'status'], name='revenue_rev_artist__8f9a0b_idx'),
                    models.Index(fields=['source'], name='revenue_rev_source_1c2d3e_idx'),
                    models.Index(fields=['status'], name='revenue_rev_status_4f5a6b_idx'),
                ],
            },
        ),
    ]

import decimal

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
            name='MarketingCampaign',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, validators=[django.core.validators.MinLengthValidator(3)])),
                ('description', models.TextField(blank=True, validators=[django.core.validators.MaxLengthValidator(1000)])),
                ('type', models.CharField(choices=[('email', 'Email'), ('social', 'Social Media'), ('paid_ads', 'Paid Ads'), ('influencer', 'Influencer'), ('pr', 'PR'), ('events', 'Events'), ('other', 'Other')], max_length=20)),
                ('status', models.CharField(choices=[('draft', 'Draft'), ('scheduled', 'Scheduled'), ('active', 'Active'), ('paused', 'Paused'), ('completed', 'Completed'), ('cancelled', 'Cancelled')], default='draft', max_length=20)),
                ('platforms', models.JSONField(blank=True, default=list, help_text="Platforms the campaign runs on (e.g. ['instagram', 'tiktok'])")),
                ('budget', models.DecimalField(decimal_places=2, default=decimal.Decimal('0.00'), max_digits=10, validators=[django.core.validators.MinValueValidator(0)])),
                ('spent_amount', models.DecimalField(decimal_places=2, default=decimal.Decimal('0.00'), help_text='Clamped to budget on save', max_digits=10, validators=[django.core.validators.MinValueValidator(0)])),
                ('target_audience', models.JSONField(blank=True, default=dict)),
                ('start_date', models.DateTimeField()),
                ('end_date', models.DateTimeField(blank=True, null=True)),
                ('goals', models.JSONField(blank=True, default=dict, help_text='Targets, e.g. {"reach": 10000, "engagement": 500, "conversions": 50}')),
                ('metrics', models.JSONField(blank=True, default=dict, help_text='Observed values, e.g. {"reach": 8500, "sent": 1200, "opened": 300}')),
                ('assets', models.JSONField(blank=True, default=list, help_text='URLs to campaign assets (images, videos, documents)')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('artist', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='marketing_campaigns', to='identity.artist')),
                ('created_by', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='created_marketing_campaigns', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Marketing Campaign',
                'verbose_name_plural': 'Marketing Campaigns',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['artist', 'status'], name='campaigns_m_artist__1a2b3c_idx'),
                    models.Index(fields=['type'], name='campaigns_m_type_4d5e6f_idx'),
                    models.Index(fields=['start_date'], name='campaigns_m_start_d_7a8b9c_idx'),
                    models.Index(fields=['end_date'], name='campaigns_m_end_dat_0d1e2f_idx'),
                    models.Index(fields=['created_at'], name='campaigns_m_created_3a4b5c_idx'),
                ],
            },
        ),
    ]

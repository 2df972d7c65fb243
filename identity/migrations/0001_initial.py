import django.core.validators
import django.db.models.deletion
import identity.models
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Artist',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('stage_name', models.CharField(help_text='Public artist name', max_length=100, unique=True, validators=[django.core.validators.MinLengthValidator(2)])),
                ('bio', models.TextField(blank=True, validators=[django.core.validators.MaxLengthValidator(2000)])),
                ('genre', models.CharField(default='Electronic', max_length=50, validators=[django.core.validators.MinLengthValidator(2)])),
                ('website', models.URLField(blank=True, max_length=500)),
                ('avatar', models.URLField(blank=True, max_length=500)),
                ('banner', models.URLField(blank=True, max_length=500)),
                ('spotify_id', models.CharField(blank=True, max_length=100, null=True, unique=True)),
                ('apple_id', models.CharField(blank=True, max_length=100, null=True, unique=True)),
                ('youtube_id', models.CharField(blank=True, max_length=100, null=True, unique=True)),
                ('facebook_id', models.CharField(blank=True, max_length=100, null=True, unique=True)),
                ('instagram_handle', models.CharField(blank=True, max_length=100, null=True, unique=True, validators=[identity.models.INSTAGRAM_HANDLE_VALIDATOR])),
                ('tiktok_handle', models.CharField(blank=True, max_length=100, null=True, unique=True, validators=[identity.models.TIKTOK_HANDLE_VALIDATOR])),
                ('twitter_handle', models.CharField(blank=True, max_length=100, null=True, unique=True, validators=[identity.models.TWITTER_HANDLE_VALIDATOR])),
                ('location', models.CharField(blank=True, max_length=200)),
                ('founded_year', models.PositiveIntegerField(blank=True, null=True, validators=[identity.models.validate_founded_year])),
                ('is_verified', models.BooleanField(default=False)),
                ('total_followers', models.PositiveIntegerField(default=0)),
                ('total_streams', models.PositiveBigIntegerField(default=0)),
                ('total_revenue', models.DecimalField(decimal_places=2, default=0, max_digits=12, validators=[django.core.validators.MinValueValidator(0)])),
                ('monthly_listeners', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='artist_profile', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Artist',
                'verbose_name_plural': 'Artists',
                'ordering': ['stage_name'],
                'indexes': [
                    models.Index(fields=['genre'], name='identity_ar_genre_8c1b2d_idx'),
                    models.Index(fields=['is_verified'], name='identity_ar_is_veri_4e7a90_idx'),
                ],
            },
        ),
    ]

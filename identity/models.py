from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MaxLengthValidator, MinLengthValidator, MinValueValidator, RegexValidator
from django.db import models
from django.utils import timezone

from api.formatting import format_currency, format_number

INSTAGRAM_HANDLE_VALIDATOR = RegexValidator(r'^[a-zA-Z0-9._]+$', "Handle may only contain letters, digits, '.' and '_'.")
TIKTOK_HANDLE_VALIDATOR = INSTAGRAM_HANDLE_VALIDATOR
TWITTER_HANDLE_VALIDATOR = RegexValidator(r'^[a-zA-Z0-9_]+$', "Handle may only contain letters, digits and '_'.")

HANDLE_FIELDS = ['instagram_handle', 'tiktok_handle', 'twitter_handle']


def strip_handle(value):
    """Drop a single leading '@' and surrounding whitespace from a social handle."""
    if value is None:
        return None
    value = value.strip()
    if value.startswith('@'):
        value = value[1:]
    return value or None


def validate_founded_year(value):
    current_year = timezone.now().year
    if value is not None and not 1900 <= value <= current_year:
        raise ValidationError(f"Founded year must be between 1900 and {current_year}.")


class Artist(models.Model):
    """
    Artist profile owned by exactly one user.

    The total_* and monthly_listeners counters are snapshot values written
    by whoever imports platform stats; nothing recomputes them from
    revenue streams or campaigns.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='artist_profile'
    )

    stage_name = models.CharField(
        max_length=100,
        unique=True,
        validators=[MinLengthValidator(2)],
        help_text="Public artist name"
    )
    bio = models.TextField(blank=True, validators=[MaxLengthValidator(2000)])
    genre = models.CharField(
        max_length=50,
        default='Electronic',
        validators=[MinLengthValidator(2)]
    )

    website = models.URLField(max_length=500, blank=True)
    avatar = models.URLField(max_length=500, blank=True)
    banner = models.URLField(max_length=500, blank=True)

    # Platform identifiers
    spotify_id = models.CharField(max_length=100, unique=True, null=True, blank=True)
    apple_id = models.CharField(max_length=100, unique=True, null=True, blank=True)
    youtube_id = models.CharField(max_length=100, unique=True, null=True, blank=True)
    facebook_id = models.CharField(max_length=100, unique=True, null=True, blank=True)

    # Social handles, stored without the leading '@'
    instagram_handle = models.CharField(
        max_length=100, unique=True, null=True, blank=True,
        validators=[INSTAGRAM_HANDLE_VALIDATOR]
    )
    tiktok_handle = models.CharField(
        max_length=100, unique=True, null=True, blank=True,
        validators=[TIKTOK_HANDLE_VALIDATOR]
    )
    twitter_handle = models.CharField(
        max_length=100, unique=True, null=True, blank=True,
        validators=[TWITTER_HANDLE_VALIDATOR]
    )

    location = models.CharField(max_length=200, blank=True)
    founded_year = models.PositiveIntegerField(
        null=True,
        blank=True,
        validators=[validate_founded_year]
    )
    is_verified = models.BooleanField(default=False)

    # Denormalized snapshot counters
    total_followers = models.PositiveIntegerField(default=0)
    total_streams = models.PositiveBigIntegerField(default=0)
    total_revenue = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=0,
        validators=[MinValueValidator(0)]
    )
    monthly_listeners = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Artist"
        verbose_name_plural = "Artists"
        ordering = ['stage_name']
        indexes = [
            models.Index(fields=['genre'], name='identity_ar_genre_8c1b2d_idx'),
            models.Index(fields=['is_verified'], name='identity_ar_is_veri_4e7a90_idx'),
        ]

    def __str__(self):
        return self.stage_name

    def normalize_handles(self):
        for field in HANDLE_FIELDS:
            setattr(self, field, strip_handle(getattr(self, field)))

    def clean_fields(self, exclude=None):
        self.normalize_handles()
        super().clean_fields(exclude=exclude)

    def save(self, *args, **kwargs):
        self.normalize_handles()
        super().save(*args, **kwargs)

    @property
    def social_links(self):
        return {
            'instagram': f"https://instagram.com/{self.instagram_handle}" if self.instagram_handle else None,
            'tiktok': f"https://tiktok.com/@{self.tiktok_handle}" if self.tiktok_handle else None,
            'twitter': f"https://twitter.com/{self.twitter_handle}" if self.twitter_handle else None,
            'facebook': f"https://facebook.com/{self.facebook_id}" if self.facebook_id else None,
            'spotify': f"https://open.spotify.com/artist/{self.spotify_id}" if self.spotify_id else None,
            'youtube': f"https://youtube.com/channel/{self.youtube_id}" if self.youtube_id else None,
        }

    @property
    def formatted_revenue(self):
        return format_currency(self.total_revenue)

    @property
    def formatted_followers(self):
        return format_number(self.total_followers)

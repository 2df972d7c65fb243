from decimal import Decimal
from numbers import Number

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MaxLengthValidator, MinLengthValidator, MinValueValidator
from django.db import models
from django.utils import timezone


class MarketingCampaign(models.Model):
    """
    Marketing campaign run for one artist.

    spent_amount never exceeds budget: save() clamps it instead of
    rejecting the write. goals and metrics are parallel JSON maps
    (e.g. {"reach": 10000}) compared by calculate_performance().
    """

    TYPE_CHOICES = [
        ('email', 'Email'),
        ('social', 'Social Media'),
        ('paid_ads', 'Paid Ads'),
        ('influencer', 'Influencer'),
        ('pr', 'PR'),
        ('events', 'Events'),
        ('other', 'Other'),
    ]

    STATUS_CHOICES = [
        ('draft', 'Draft'),
        ('scheduled', 'Scheduled'),
        ('active', 'Active'),
        ('paused', 'Paused'),
        ('completed', 'Completed'),
        ('cancelled', 'Cancelled'),
    ]

    artist = models.ForeignKey(
        'identity.Artist',
        on_delete=models.CASCADE,
        related_name='marketing_campaigns'
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='created_marketing_campaigns'
    )

    name = models.CharField(max_length=200, validators=[MinLengthValidator(3)])
    description = models.TextField(blank=True, validators=[MaxLengthValidator(1000)])
    type = models.CharField(max_length=20, choices=TYPE_CHOICES)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='draft')

    platforms = models.JSONField(
        default=list,
        blank=True,
        help_text="Platforms the campaign runs on (e.g. ['instagram', 'tiktok'])"
    )

    budget = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(0)]
    )
    spent_amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(0)],
        help_text="Clamped to budget on save"
    )

    target_audience = models.JSONField(default=dict, blank=True)

    start_date = models.DateTimeField()
    end_date = models.DateTimeField(null=True, blank=True)

    goals = models.JSONField(
        default=dict,
        blank=True,
        help_text='Targets, e.g. {"reach": 10000, "engagement": 500, "conversions": 50}'
    )
    metrics = models.JSONField(
        default=dict,
        blank=True,
        help_text='Observed values, e.g. {"reach": 8500, "sent": 1200, "opened": 300}'
    )
    assets = models.JSONField(
        default=list,
        blank=True,
        help_text="URLs to campaign assets (images, videos, documents)"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Marketing Campaign"
        verbose_name_plural = "Marketing Campaigns"
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['artist', 'status'], name='campaigns_m_artist__1a2b3c_idx'),
            models.Index(fields=['type'], name='campaigns_m_type_4d5e6f_idx'),
            models.Index(fields=['start_date'], name='campaigns_m_start_d_7a8b9c_idx'),
            models.Index(fields=['end_date'], name='campaigns_m_end_dat_0d1e2f_idx'),
            models.Index(fields=['created_at'], name='campaigns_m_created_3a4b5c_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.get_status_display()})"

    def clean(self):
        if self.end_date and self.start_date and self.end_date <= self.start_date:
            raise ValidationError({'end_date': "End date must be after start date"})

    def clamp_spent_amount(self):
        if self.budget is not None and self.spent_amount is not None and self.spent_amount > self.budget:
            self.spent_amount = self.budget

    def has_ended(self, now=None):
        now = now or timezone.now()
        return bool(self.end_date and self.end_date <= now)

    def complete_if_ended(self, now=None):
        """
        Move an active campaign whose end date has passed to completed.

        Returns True when the status changed. Does not save.
        """
        if self.status == 'active' and self.has_ended(now):
            self.status = 'completed'
            return True
        return False

    def save(self, *args, **kwargs):
        self.clamp_spent_amount()
        super().save(*args, **kwargs)

    @property
    def remaining_budget(self):
        return self.budget - self.spent_amount

    @property
    def budget_usage_percentage(self):
        if self.budget and self.budget > 0:
            return float(self.spent_amount / self.budget * 100)
        return 0.0

    def is_running(self, now=None):
        """Active, started, and not yet past its end date."""
        now = now or timezone.now()
        return (
            self.status == 'active'
            and self.start_date <= now
            and (self.end_date is None or self.end_date >= now)
        )

    @property
    def duration_days(self):
        """Length in whole days, rounded up; None without an end date."""
        if not self.end_date:
            return None
        seconds = (self.end_date - self.start_date).total_seconds()
        days, remainder = divmod(seconds, 86400)
        return int(days) + (1 if remainder > 0 else 0)

    def calculate_performance(self):
        """
        Score the campaign against its goals.

        Each goal with a positive numeric target and a recorded numeric
        metric contributes metric / goal * 100. The score is the rounded
        mean of those ratios:

        - >= 100: exceeds_goal
        - >= 80: on_track
        - >= 50: below_target
        - otherwise: poor
        """
        goals = self.goals if isinstance(self.goals, dict) else {}
        metrics = self.metrics if isinstance(self.metrics, dict) else {}

        details = {}
        for key, target in goals.items():
            value = metrics.get(key)
            if not isinstance(target, Number) or isinstance(target, bool) or target <= 0:
                continue
            if not isinstance(value, Number) or isinstance(value, bool):
                continue
            details[key] = value / target * 100

        average = sum(details.values()) / len(details) if details else 0

        if average >= 100:
            performance_status = 'exceeds_goal'
        elif average >= 80:
            performance_status = 'on_track'
        elif average >= 50:
            performance_status = 'below_target'
        else:
            performance_status = 'poor'

        return {
            'score': round(average),
            'details': details,
            'status': performance_status,
        }

from decimal import Decimal

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MaxLengthValidator, MinValueValidator
from django.db import models
from django.utils import timezone

from api.formatting import format_currency

CURRENCY_SYMBOLS = {
    'EUR': ('€', 2),
    'USD': ('$US', 2),
    'GBP': ('£GB', 2),
    'CAD': ('$CA', 2),
    'AUD': ('$AU', 2),
    'JPY': ('JPY', 0),
}


class RevenueStream(models.Model):
    """
    A dated revenue record for one artist.

    is_recurring is true exactly when recurring_period is set; clean()
    and save() both reject the two inconsistent combinations.
    """

    SOURCE_CHOICES = [
        ('streaming', 'Streaming'),
        ('physical_sales', 'Ventes physiques'),
        ('digital_sales', 'Ventes numériques'),
        ('live_performance', 'Concerts'),
        ('merchandise', 'Merchandising'),
        ('sync_licensing', 'Synchronisation'),
        ('publishing', 'Édition'),
        ('sponsorship', 'Parrainage'),
        ('other', 'Autre'),
    ]

    CURRENCY_CHOICES = [(code, code) for code in CURRENCY_SYMBOLS]

    RECURRING_PERIOD_CHOICES = [
        ('daily', 'Daily'),
        ('weekly', 'Weekly'),
        ('monthly', 'Monthly'),
        ('quarterly', 'Quarterly'),
        ('yearly', 'Yearly'),
    ]

    STATUS_CHOICES = [
        ('pending', 'Pending'),
        ('confirmed', 'Confirmed'),
        ('disputed', 'Disputed'),
        ('cancelled', 'Cancelled'),
    ]

    artist = models.ForeignKey(
        'identity.Artist',
        on_delete=models.CASCADE,
        related_name='revenue_streams'
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='created_revenue_streams'
    )

    source = models.CharField(max_length=30, choices=SOURCE_CHOICES)
    platform = models.CharField(
        max_length=100,
        blank=True,
        help_text="Platform/service name (e.g., Spotify, Apple Music, Bandcamp)"
    )
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(0)]
    )
    currency = models.CharField(max_length=3, choices=CURRENCY_CHOICES, default='EUR')
    date = models.DateField(help_text="Date when the revenue was generated")
    description = models.TextField(blank=True, validators=[MaxLengthValidator(500)])
    metadata = models.JSONField(
        default=dict,
        blank=True,
        help_text="Additional data like stream counts, track info, venue details"
    )

    is_recurring = models.BooleanField(default=False)
    recurring_period = models.CharField(
        max_length=20,
        choices=RECURRING_PERIOD_CHOICES,
        null=True,
        blank=True
    )

    contract_id = models.CharField(max_length=100, blank=True)
    taxable = models.BooleanField(default=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='pending')
    payout_date = models.DateField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Revenue Stream"
        verbose_name_plural = "Revenue Streams"
        ordering = ['-date', '-created_at']
        indexes = [
            models.Index(fields=['artist', 'date'], name='revenue_rev_artist__5c6d7e_idx'),
            models.Index(fields=['artist', 'status'], name='revenue_rev_artist__8f9a0b_idx'),
            models.Index(fields=['source'], name='revenue_rev_source_1c2d3e_idx'),
            models.Index(fields=['status'], name='revenue_rev_status_4f5a6b_idx'),
        ]

    def __str__(self):
        return f"{self.get_source_display()} {self.amount} {self.currency} ({self.date})"

    def validate_recurring(self):
        if self.is_recurring and not self.recurring_period:
            raise ValidationError({'recurring_period': "Recurring period must be specified for recurring revenue"})
        if not self.is_recurring and self.recurring_period:
            raise ValidationError({'recurring_period': "Recurring period should not be set for non-recurring revenue"})

    def clean_fields(self, exclude=None):
        if self.currency:
            self.currency = self.currency.upper()
        super().clean_fields(exclude=exclude)

    def clean(self):
        self.validate_recurring()

    def save(self, *args, **kwargs):
        self.validate_recurring()
        if self.currency:
            self.currency = self.currency.upper()
        if not self.platform and isinstance(self.metadata, dict) and self.metadata.get('platform'):
            self.platform = str(self.metadata['platform'])[:100]
        super().save(*args, **kwargs)

    @property
    def source_label(self):
        return self.get_source_display()

    @property
    def formatted_amount(self):
        symbol, decimals = CURRENCY_SYMBOLS.get(self.currency, (self.currency, 2))
        return format_currency(self.amount, symbol=symbol, decimals=decimals)

    def is_overdue(self, today=None):
        """Pending revenue whose payout date is in the past."""
        if not self.payout_date:
            return False
        today = today or timezone.localdate()
        return self.status == 'pending' and self.payout_date < today

    def net_amount(self, tax_rate=Decimal('0.2')):
        """Amount after a flat tax rate; untaxed revenue is returned as is."""
        if not self.taxable:
            return self.amount
        return self.amount * (Decimal('1') - Decimal(str(tax_rate)))

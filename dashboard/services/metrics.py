"""
Role-specific dashboard metric cards.

build_metrics() always returns four cards, in a fixed order per role:

    {label, value, change, breakdown, trend, color}

Amounts are summed as floats parsed from the stored decimals and shown as
fr-FR euros; counts of 1000 and more are compacted ('1.2K').
"""
import logging
from datetime import datetime, timedelta
from numbers import Number
from typing import Dict, List, Optional

from dateutil.relativedelta import relativedelta
from django.db.models import Sum
from django.utils import timezone

from api.formatting import format_currency, format_number, format_percent_change
from api.roles import UserRole
from campaigns.models import MarketingCampaign
from identity.models import Artist
from revenue.models import RevenueStream

logger = logging.getLogger(__name__)

COMPARISON_WINDOW = timedelta(days=30)


def card(label, value, change, breakdown, trend, color) -> Dict[str, str]:
    return {
        'label': label,
        'value': value,
        'change': change,
        'breakdown': breakdown,
        'trend': trend,
        'color': color,
    }


def scope_label(artist_ids) -> str:
    return 'Cet artiste' if len(artist_ids) == 1 else 'Tous artistes'


def percent_change(current: float, previous: float) -> float:
    """Relative change in percent; 0 when there is nothing to compare with."""
    if previous > 0:
        return (current - previous) / previous * 100
    return 0.0


def metric_number(value) -> float:
    if isinstance(value, Number) and not isinstance(value, bool):
        return float(value)
    return 0.0


def sum_amounts(queryset) -> float:
    return sum(float(amount) for amount in queryset.values_list('amount', flat=True))


def email_totals(artist_ids, start, end=None):
    """Sum the sent/opened counters of email campaigns created in [start, end)."""
    campaigns = MarketingCampaign.objects.filter(artist_id__in=artist_ids, type='email', created_at__gte=start)
    if end is not None:
        campaigns = campaigns.filter(created_at__lt=end)

    sent = opened = 0.0
    for metrics in campaigns.values_list('metrics', flat=True):
        if isinstance(metrics, dict):
            sent += metric_number(metrics.get('sent'))
            opened += metric_number(metrics.get('opened'))
    return sent, opened


def open_rate(sent: float, opened: float) -> float:
    return opened / sent * 100 if sent > 0 else 0.0


def marketing_metrics(artist_ids, now) -> List[Dict[str, str]]:
    cutoff = now - COMPARISON_WINDOW
    campaigns = MarketingCampaign.objects.filter(artist_id__in=artist_ids, status='active')

    active = campaigns.count()
    previous_active = campaigns.filter(created_at__lt=cutoff).count()
    delta = active - previous_active

    sent, opened = email_totals(artist_ids, cutoff)
    previous_sent, previous_opened = email_totals(artist_ids, cutoff - COMPARISON_WINDOW, cutoff)
    sent_change = percent_change(sent, previous_sent)

    rate = open_rate(sent, opened)
    rate_change = round(rate, 1) - round(open_rate(previous_sent, previous_opened), 1)

    followers = Artist.objects.filter(id__in=artist_ids).aggregate(total=Sum('total_followers'))['total'] or 0

    breakdown = scope_label(artist_ids)
    return [
        card(
            'Campagnes actives', str(active), f"{delta:+d}", breakdown,
            'up' if active >= previous_active else 'down', 'blue',
        ),
        card(
            'Emails envoyés', format_number(sent), format_percent_change(sent_change), breakdown,
            'up' if sent >= previous_sent else 'down', 'green',
        ),
        card(
            "Taux d'ouverture moyen", f"{rate:.1f}%", format_percent_change(rate_change, 1), 'Moyenne pondérée',
            'up' if rate_change >= 0 else 'down', 'purple',
        ),
        card('Followers totaux', format_number(followers), '+0', 'Tous réseaux', 'stable', 'orange'),
    ]


def financial_metrics(artist_ids, now) -> List[Dict[str, str]]:
    this_month_start = timezone.localtime(now).date().replace(day=1)
    last_month_start = this_month_start - relativedelta(months=1)

    confirmed = RevenueStream.objects.filter(artist_id__in=artist_ids, status='confirmed')
    this_month = confirmed.filter(date__gte=this_month_start)
    last_month = confirmed.filter(date__gte=last_month_start, date__lt=this_month_start)

    total = sum_amounts(this_month)
    total_change = percent_change(total, sum_amounts(last_month))

    breakdown = scope_label(artist_ids)
    cards = [
        card(
            'Revenus totaux', format_currency(total), format_percent_change(total_change), breakdown,
            'up' if total_change >= 0 else 'down', 'green',
        ),
        card('Dépenses totales', format_currency(0), '0%', breakdown, 'stable', 'red'),
    ]

    for label, source, color in (('Streaming total', 'streaming', 'blue'),
                                 ('Tournées total', 'live_performance', 'purple')):
        current = sum_amounts(this_month.filter(source=source))
        change = percent_change(current, sum_amounts(last_month.filter(source=source)))
        cards.append(card(
            label, format_currency(current), format_percent_change(change), breakdown,
            'up' if change >= 0 else 'down', color,
        ))
    return cards


def tour_metrics(artist_ids) -> List[Dict[str, str]]:
    # No tour entities exist yet
    breakdown = scope_label(artist_ids)
    return [
        card('Shows programmés', '0', '+0', breakdown, 'stable', 'blue'),
        card('Venues confirmées', '0', '+0', breakdown, 'stable', 'green'),
        card('Revenus prévisionnels', format_currency(0), '+0', breakdown, 'stable', 'yellow'),
        card('Holds actifs', '0', '+0', breakdown, 'stable', 'purple'),
    ]


def general_metrics(artist_ids) -> List[Dict[str, str]]:
    return [
        card('Projets actifs', '0', '+0', 'Tous artistes', 'stable', 'blue'),
        card('Tâches complétées', '0%', '+0%', 'Moyenne', 'stable', 'green'),
        card('Documents partagés', '0', '+0', 'Tous artistes', 'stable', 'purple'),
        card('Artistes gérés', str(len(artist_ids)), '+0', 'Portfolio', 'stable', 'orange'),
    ]


def build_metrics(role, artist_ids, now: Optional[datetime] = None) -> List[Dict[str, str]]:
    """
    Build the four metric cards for `role` over `artist_ids`.

    Database errors propagate to the caller; there is no partial result.
    """
    now = now or timezone.now()
    artist_ids = list(artist_ids)

    if role == UserRole.MARKETING_MANAGER:
        return marketing_metrics(artist_ids, now)
    elif role == UserRole.FINANCIAL_MANAGER:
        return financial_metrics(artist_ids, now)
    elif role == UserRole.TOUR_MANAGER:
        return tour_metrics(artist_ids)
    elif role in (UserRole.ARTIST, UserRole.ALBUM_MANAGER, UserRole.PRESS_OFFICER, UserRole.ADMIN):
        return general_metrics(artist_ids)

    raise ValueError(f"Unknown role '{role}'")

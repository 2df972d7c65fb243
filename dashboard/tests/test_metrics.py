"""
Tests for the dashboard metric cards and activity feed builders.

Tests cover:
- Financial cards: confirmed revenue of the current month, month-over-month change
- Marketing cards: active campaign delta, email volume and open rate
- Tour and general placeholder cards
- Unknown roles are rejected
- Building twice with the same clock and data gives the same cards
- Activity formatting, ordering and fallbacks
"""
from datetime import date, datetime, timedelta, timezone as dt_timezone
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.utils import timezone

from api.roles import UserRole
from campaigns.models import MarketingCampaign
from dashboard.services.activity import NO_DETAIL, UNKNOWN_AUTHOR, recent_activities
from dashboard.services.metrics import build_metrics, percent_change
from identity.models import Artist
from revenue.models import RevenueStream
from timeline.models import ActivityTimeline

User = get_user_model()


class MetricsTestMixin:

    def setUp(self):
        self.user = User.objects.create_user(
            email='sarah@example.com', password='pass', first_name='Sarah', last_name='Lopez'
        )
        self.artist = Artist.objects.create(user=self.user, stage_name='Sarah Lopez', total_followers=125000)

    def labels(self, cards):
        return [c['label'] for c in cards]


class FinancialMetricsTestCase(MetricsTestMixin, TestCase):

    def setUp(self):
        super().setUp()
        self.now = datetime(2024, 6, 20, 12, 0, tzinfo=dt_timezone.utc)

        def revenue(source, amount, day, status='confirmed'):
            RevenueStream.objects.create(
                artist=self.artist, source=source, amount=Decimal(amount), date=day, status=status
            )

        revenue('streaming', '2500.50', date(2024, 6, 3))
        revenue('live_performance', '1500.00', date(2024, 6, 8))
        revenue('merchandise', '1800.75', date(2024, 6, 15))
        revenue('streaming', '9999.00', date(2024, 6, 16), status='pending')
        revenue('streaming', '5000.00', date(2024, 5, 10))
        revenue('streaming', '700.00', date(2024, 4, 30))

    def test_financial_cards(self):
        cards = build_metrics(UserRole.FINANCIAL_MANAGER, [self.artist.id], now=self.now)

        self.assertEqual(
            self.labels(cards),
            ['Revenus totaux', 'Dépenses totales', 'Streaming total', 'Tournées total'],
        )

        total = cards[0]
        self.assertEqual(total['value'], '5\u202f801,25\xa0€')
        self.assertEqual(total['change'], '+16%')
        self.assertEqual(total['trend'], 'up')
        self.assertEqual(total['breakdown'], 'Cet artiste')

        expenses = cards[1]
        self.assertEqual(expenses['value'], '0,00\xa0€')
        self.assertEqual(expenses['trend'], 'stable')

        streaming = cards[2]
        self.assertEqual(streaming['value'], '2\u202f500,50\xa0€')
        self.assertEqual(streaming['change'], '-50%')
        self.assertEqual(streaming['trend'], 'down')

        # Nothing last month to compare with
        tours = cards[3]
        self.assertEqual(tours['value'], '1\u202f500,00\xa0€')
        self.assertEqual(tours['change'], '+0%')

    def test_empty_scope(self):
        cards = build_metrics(UserRole.FINANCIAL_MANAGER, [], now=self.now)

        self.assertEqual(cards[0]['value'], '0,00\xa0€')
        self.assertEqual(cards[0]['breakdown'], 'Tous artistes')

    def test_repeated_builds_agree(self):
        first = build_metrics(UserRole.FINANCIAL_MANAGER, [self.artist.id], now=self.now)
        second = build_metrics(UserRole.FINANCIAL_MANAGER, [self.artist.id], now=self.now)

        self.assertEqual(first, second)


class MarketingMetricsTestCase(MetricsTestMixin, TestCase):

    def make_campaign(self, name, type='social', status='draft', age=None, metrics=None):
        campaign = MarketingCampaign.objects.create(
            artist=self.artist, created_by=self.user, name=name, type=type, status=status,
            start_date=self.now - timedelta(days=60), metrics=metrics or {},
        )
        if age is not None:
            MarketingCampaign.objects.filter(pk=campaign.pk).update(created_at=self.now - age)
        return campaign

    def setUp(self):
        super().setUp()
        self.now = timezone.now()
        self.make_campaign('Old active', status='active', age=timedelta(days=40))
        self.make_campaign('New active', status='active')
        self.make_campaign('Newsletter juin', type='email', metrics={'sent': 1200, 'opened': 300})
        self.make_campaign('Newsletter avril', type='email', age=timedelta(days=45),
                           metrics={'sent': 1000, 'opened': 200})

    def test_marketing_cards(self):
        cards = build_metrics(UserRole.MARKETING_MANAGER, [self.artist.id], now=self.now)

        active, emails, rate, followers = cards
        self.assertEqual(active['label'], 'Campagnes actives')
        self.assertEqual(active['value'], '2')
        self.assertEqual(active['change'], '+1')

        self.assertEqual(emails['value'], '1.2K')
        self.assertEqual(emails['change'], '+20%')
        self.assertEqual(emails['trend'], 'up')

        self.assertEqual(rate['value'], '25.0%')
        self.assertEqual(rate['change'], '+5.0%')
        self.assertEqual(rate['breakdown'], 'Moyenne pondérée')

        self.assertEqual(followers['value'], '125.0K')
        self.assertEqual(followers['trend'], 'stable')

    def test_malformed_metrics_are_ignored(self):
        self.make_campaign('Broken', type='email', metrics={'sent': 'many', 'opened': True})
        cards = build_metrics(UserRole.MARKETING_MANAGER, [self.artist.id], now=self.now)

        self.assertEqual(cards[1]['value'], '1.2K')

    def test_repeated_builds_agree(self):
        first = build_metrics(UserRole.MARKETING_MANAGER, [self.artist.id], now=self.now)

        self.assertEqual(build_metrics(UserRole.MARKETING_MANAGER, [self.artist.id], now=self.now), first)


class OtherRoleMetricsTestCase(MetricsTestMixin, TestCase):

    def test_tour_manager_cards(self):
        cards = build_metrics(UserRole.TOUR_MANAGER, [self.artist.id])

        self.assertEqual(len(cards), 4)
        self.assertEqual(cards[0]['label'], 'Shows programmés')
        self.assertTrue(all(c['trend'] == 'stable' for c in cards))

    def test_general_cards_count_artists(self):
        cards = build_metrics(UserRole.ARTIST, [self.artist.id, 99])

        self.assertEqual(cards[3]['label'], 'Artistes gérés')
        self.assertEqual(cards[3]['value'], '2')

    def test_unknown_role(self):
        with self.assertRaises(ValueError):
            build_metrics('roadie', [self.artist.id])

    def test_percent_change(self):
        self.assertEqual(percent_change(150, 100), 50.0)
        self.assertEqual(percent_change(10, 0), 0.0)


class RecentActivitiesTestCase(MetricsTestMixin, TestCase):

    def setUp(self):
        super().setUp()
        self.now = timezone.now()
        ActivityTimeline.objects.create(
            artist=self.artist, created_by=self.user, type='email_sent',
            action='Newsletter envoyée', description='1200 destinataires',
            created_at=self.now - timedelta(minutes=5),
        )
        ActivityTimeline.objects.create(
            artist=self.artist, type='revenue_received', action='Paiement Spotify',
            created_at=self.now - timedelta(hours=2),
        )
        ActivityTimeline.objects.create(
            artist=self.artist, created_by=self.user, type='other', action='Ancienne note',
            created_at=self.now - timedelta(days=3),
        )

    def test_newest_first_with_limit(self):
        activities = recent_activities([self.artist.id], 2, now=self.now)

        self.assertEqual([a['action'] for a in activities], ['Newsletter envoyée', 'Paiement Spotify'])
        self.assertEqual(activities[0]['time'], '5min')
        self.assertEqual(activities[1]['time'], '2h')

    def test_formatting_and_fallbacks(self):
        first, second, third = recent_activities([self.artist.id], 10, now=self.now)

        self.assertEqual(first['detail'], '1200 destinataires')
        self.assertEqual(first['author'], 'Sarah Lopez')
        self.assertEqual(first['artist'], 'Sarah Lopez')
        self.assertEqual(first['type'], 'info')

        self.assertEqual(second['detail'], NO_DETAIL)
        self.assertEqual(second['author'], UNKNOWN_AUTHOR)
        self.assertEqual(second['type'], 'success')

        self.assertEqual(third['time'], '3j')

    def test_other_artists_excluded(self):
        self.assertEqual(recent_activities([self.artist.id + 1], 10, now=self.now), [])

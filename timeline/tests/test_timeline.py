"""
Tests for the activity timeline.

Tests cover:
- Type defaults applied on creation only
- Derived display fields (icon, type_label, colors, time_ago)
- Feed visibility follows team membership
- Writing entries needs artist:edit
"""
from datetime import timedelta

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient

from api.models import TeamMembership
from api.roles import UserRole
from identity.models import Artist
from timeline.models import ActivityTimeline

User = get_user_model()


def make_user(email, role=UserRole.ARTIST):
    user = User.objects.create_user(email=email, password='pass', first_name='Test', last_name='User')
    user.profile.role = role
    user.profile.save()
    return user


class ActivityTimelineModelTestCase(TestCase):

    def setUp(self):
        self.owner = make_user('sarah@example.com')
        self.artist = Artist.objects.create(user=self.owner, stage_name='Sarah Lopez')

    def make_activity(self, **kwargs):
        defaults = {'artist': self.artist, 'created_by': self.owner, 'type': 'other', 'action': 'Something happened'}
        defaults.update(kwargs)
        return ActivityTimeline.objects.create(**defaults)

    def test_contract_signed_defaults(self):
        activity = self.make_activity(type='contract_signed', status='info', priority='low')

        self.assertEqual(activity.status, 'success')
        self.assertEqual(activity.priority, 'high')

    def test_revenue_and_expense_defaults(self):
        self.assertEqual(self.make_activity(type='revenue_received').status, 'success')
        self.assertEqual(self.make_activity(type='expense_logged').status, 'warning')

    def test_other_types_keep_given_values(self):
        activity = self.make_activity(type='email_sent', status='error', priority='urgent')

        self.assertEqual(activity.status, 'error')
        self.assertEqual(activity.priority, 'urgent')

    def test_defaults_not_reapplied_on_update(self):
        activity = self.make_activity(type='contract_signed')
        activity.status = 'warning'
        activity.priority = 'low'
        activity.save()
        activity.refresh_from_db()

        self.assertEqual(activity.status, 'warning')
        self.assertEqual(activity.priority, 'low')

    def test_display_fields(self):
        activity = self.make_activity(type='campaign_launch', priority='urgent')

        self.assertEqual(activity.icon, '🚀')
        self.assertEqual(activity.type_label, 'Campagne lancée')
        self.assertEqual(activity.status_color, 'blue')
        self.assertEqual(activity.priority_color, 'red')

    def test_time_ago(self):
        now = timezone.now()
        activity = self.make_activity(created_at=now - timedelta(hours=3))

        self.assertEqual(activity.time_ago(now), '3h')


class ActivityTimelineAPITestCase(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.owner = make_user('sarah@example.com')
        self.manager = make_user('marie@example.com', UserRole.MARKETING_MANAGER)
        self.other_owner = make_user('mike@example.com')

        self.artist = Artist.objects.create(user=self.owner, stage_name='Sarah Lopez')
        self.other_artist = Artist.objects.create(user=self.other_owner, stage_name='DJ Mike')
        TeamMembership.objects.create(user=self.manager, artist=self.artist, role=UserRole.MARKETING_MANAGER)

        ActivityTimeline.objects.create(artist=self.artist, type='email_sent', action='Newsletter envoyée')
        ActivityTimeline.objects.create(artist=self.other_artist, type='social_post', action='Nouveau post')

    def test_feed_limited_to_team_artists(self):
        self.client.force_authenticate(user=self.manager)
        response = self.client.get('/api/v1/timeline')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        results = response.data['data']['results']
        self.assertEqual(len(results), 1)
        self.assertEqual(results[0]['action'], 'Newsletter envoyée')
        self.assertEqual(results[0]['icon'], '📧')
        self.assertEqual(results[0]['time_ago'], "À l'instant")

    def test_owner_adds_entry(self):
        self.client.force_authenticate(user=self.owner)
        response = self.client.post('/api/v1/timeline', {
            'artist': self.artist.id,
            'type': 'revenue_received',
            'action': 'Paiement Spotify reçu',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['data']['status'], 'success')
        self.assertEqual(response.data['data']['created_by'], self.owner.id)

    def test_viewer_cannot_add_entry(self):
        self.client.force_authenticate(user=self.manager)
        response = self.client.post('/api/v1/timeline', {
            'artist': self.artist.id, 'type': 'other', 'action': 'Not allowed',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_foreign_entry_not_found(self):
        foreign = ActivityTimeline.objects.get(artist=self.other_artist)
        self.client.force_authenticate(user=self.owner)
        response = self.client.get(f'/api/v1/timeline/{foreign.id}')

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

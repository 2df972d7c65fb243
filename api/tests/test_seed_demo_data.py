"""
Tests for the seed_demo_data management command.

Tests cover:
- Demo users, artists, memberships, campaigns, revenue and activity are created
- Running twice does not duplicate rows
- --flush removes demo data before reseeding
"""
from io import StringIO

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.test import TestCase

from api.models import TeamMembership
from api.roles import UserRole
from campaigns.models import MarketingCampaign
from identity.models import Artist
from revenue.models import RevenueStream
from timeline.models import ActivityTimeline

User = get_user_model()


class SeedDemoDataTestCase(TestCase):

    def seed(self, *args):
        call_command('seed_demo_data', *args, stdout=StringIO())

    def counts(self):
        return {
            'users': User.objects.count(),
            'artists': Artist.objects.count(),
            'memberships': TeamMembership.objects.count(),
            'campaigns': MarketingCampaign.objects.count(),
            'revenue': RevenueStream.objects.count(),
            'activities': ActivityTimeline.objects.count(),
        }

    def test_seeds_demo_dataset(self):
        self.seed()

        # Two active campaigns add their own launch entries
        self.assertEqual(self.counts(), {
            'users': 5, 'artists': 2, 'memberships': 4,
            'campaigns': 3, 'revenue': 5, 'activities': 5,
        })

        marie = User.objects.get(email='marie.dubois@artisthub.fr')
        self.assertEqual(marie.profile.role, UserRole.MARKETING_MANAGER)
        self.assertTrue(marie.check_password('password123'))
        self.assertTrue(User.objects.get(email='admin@artisthub.fr').is_staff)

        sarah = Artist.objects.get(stage_name='Sarah Lopez')
        self.assertEqual(sarah.instagram_handle, 'sarahlopezmusic')
        self.assertEqual(sarah.user.email, 'sarah.lopez@artisthub.fr')

    def test_idempotent(self):
        self.seed()
        first = self.counts()
        self.seed()

        self.assertEqual(self.counts(), first)

    def test_flush(self):
        self.seed()
        sarah = Artist.objects.get(stage_name='Sarah Lopez')
        ActivityTimeline.objects.create(artist=sarah, type='other', action='Note manuelle')

        self.seed('--flush')

        self.assertFalse(ActivityTimeline.objects.filter(action='Note manuelle').exists())
        self.assertEqual(self.counts()['activities'], 5)
        self.assertNotEqual(Artist.objects.get(stage_name='Sarah Lopez').pk, sarah.pk)

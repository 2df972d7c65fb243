"""
Tests for the campaign endpoints.

Tests cover:
- Marketing managers create campaigns for their artists; created_by is the requester
- The artist role can view but not create campaigns
- Users outside the team see nothing
- end_date <= start_date is a 422 with field details
- Updating an ended active campaign completes it
- The performance action
- Campaigns of artists where a membership lacks marketing:view stay hidden
"""
from datetime import timedelta

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient

from api.models import TeamMembership
from api.roles import UserRole
from campaigns.models import MarketingCampaign
from identity.models import Artist

User = get_user_model()


def make_user(email, role=UserRole.ARTIST):
    user = User.objects.create_user(email=email, password='pass', first_name='Test', last_name='User')
    user.profile.role = role
    user.profile.save()
    return user


class CampaignAPITestCase(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.owner = make_user('sarah@example.com')
        self.manager = make_user('marie@example.com', UserRole.MARKETING_MANAGER)
        self.outsider = make_user('outsider@example.com', UserRole.MARKETING_MANAGER)

        self.artist = Artist.objects.create(user=self.owner, stage_name='Sarah Lopez')
        TeamMembership.objects.create(user=self.manager, artist=self.artist, role=UserRole.MARKETING_MANAGER)

        self.now = timezone.now()
        self.campaign = MarketingCampaign.objects.create(
            artist=self.artist,
            created_by=self.manager,
            name='Album teaser',
            type='social',
            status='draft',
            start_date=self.now - timedelta(days=10),
            goals={'reach': 10000},
            metrics={'reach': 8500},
        )

    def payload(self, **kwargs):
        data = {
            'artist': self.artist.id,
            'name': 'Newsletter Octobre',
            'type': 'email',
            'platforms': ['email'],
            'budget': '500.00',
            'start_date': self.now.isoformat(),
        }
        data.update(kwargs)
        return data

    def test_marketing_manager_creates_campaign(self):
        self.client.force_authenticate(user=self.manager)
        response = self.client.post('/api/v1/campaigns', self.payload(), format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(response.data['success'])
        self.assertEqual(response.data['message'], 'Marketing Campaign created successfully')
        campaign = MarketingCampaign.objects.get(name='Newsletter Octobre')
        self.assertEqual(campaign.created_by, self.manager)
        self.assertEqual(response.data['data']['artist_detail']['stage_name'], 'Sarah Lopez')

    def test_artist_role_cannot_create_campaign(self):
        self.client.force_authenticate(user=self.owner)
        response = self.client.post('/api/v1/campaigns', self.payload(), format='json')

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data['code'], 'FORBIDDEN')

    def test_artist_role_can_list_campaigns(self):
        self.client.force_authenticate(user=self.owner)
        response = self.client.get('/api/v1/campaigns')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['count'], 1)

    def test_outsider_cannot_create_for_foreign_artist(self):
        self.client.force_authenticate(user=self.outsider)
        response = self.client.post('/api/v1/campaigns', self.payload(), format='json')

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_outsider_sees_no_campaigns(self):
        # No membership means no marketing:view anywhere
        self.client.force_authenticate(user=self.outsider)
        response = self.client.get(f'/api/v1/campaigns/{self.campaign.id}')

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_end_date_must_follow_start_date(self):
        self.client.force_authenticate(user=self.manager)
        response = self.client.post(
            '/api/v1/campaigns',
            self.payload(end_date=(self.now - timedelta(days=1)).isoformat()),
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)
        self.assertEqual(response.data['code'], 'VALIDATION_ERROR')
        self.assertEqual(response.data['details'][0]['field'], 'end_date')

    def test_platforms_must_be_strings(self):
        self.client.force_authenticate(user=self.manager)
        response = self.client.post('/api/v1/campaigns', self.payload(platforms=[1, 2]), format='json')

        self.assertEqual(response.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)

    def test_update_completes_ended_active_campaign(self):
        self.campaign.status = 'active'
        self.campaign.end_date = self.now - timedelta(days=1)
        self.campaign.save()

        self.client.force_authenticate(user=self.manager)
        response = self.client.patch(
            f'/api/v1/campaigns/{self.campaign.id}', {'description': 'Wrap-up'}, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.campaign.refresh_from_db()
        self.assertEqual(self.campaign.status, 'completed')

    def test_artist_cannot_be_changed(self):
        other_owner = make_user('mike@example.com')
        other = Artist.objects.create(user=other_owner, stage_name='DJ Mike')
        TeamMembership.objects.create(user=self.manager, artist=other, role=UserRole.MARKETING_MANAGER)

        self.client.force_authenticate(user=self.manager)
        response = self.client.patch(
            f'/api/v1/campaigns/{self.campaign.id}', {'artist': other.id}, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)

    def test_performance_action(self):
        self.client.force_authenticate(user=self.owner)
        response = self.client.get(f'/api/v1/campaigns/{self.campaign.id}/performance')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['score'], 85)
        self.assertEqual(response.data['data']['status'], 'on_track')
        self.assertEqual(response.data['message'], 'Campaign performance calculated successfully')

    def test_campaigns_hidden_where_membership_lacks_marketing_view(self):
        other_owner = make_user('mike@example.com')
        other = Artist.objects.create(user=other_owner, stage_name='DJ Mike')
        TeamMembership.objects.create(user=self.manager, artist=other, role=UserRole.FINANCIAL_MANAGER)
        MarketingCampaign.objects.create(
            artist=other, created_by=other_owner, name='Secret tour teaser', type='social',
            start_date=self.now,
        )

        self.client.force_authenticate(user=self.manager)
        response = self.client.get('/api/v1/campaigns')

        names = [row['name'] for row in response.data['data']['results']]
        self.assertEqual(names, ['Album teaser'])

"""
Seed a demo dataset: team members, two artists, memberships, campaigns,
revenue streams and timeline entries.

Usage:
    python manage.py seed_demo_data
    python manage.py seed_demo_data --flush

Every demo account uses the password 'password123'. Running the command
again updates the existing rows instead of duplicating them.
"""
from datetime import timedelta
from decimal import Decimal

from dateutil.relativedelta import relativedelta
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from api.models import TeamMembership
from api.roles import UserRole
from campaigns.models import MarketingCampaign
from identity.models import Artist
from revenue.models import RevenueStream
from timeline.models import ActivityTimeline

User = get_user_model()

DEMO_PASSWORD = 'password123'

DEMO_USERS = [
    {'email': 'admin@artisthub.fr', 'first_name': 'Admin', 'last_name': 'ArtistHub', 'role': UserRole.ADMIN},
    {'email': 'marie.dubois@artisthub.fr', 'first_name': 'Marie', 'last_name': 'Dubois',
     'role': UserRole.MARKETING_MANAGER},
    {'email': 'paul.martin@artisthub.fr', 'first_name': 'Paul', 'last_name': 'Martin',
     'role': UserRole.FINANCIAL_MANAGER},
    {'email': 'sarah.lopez@artisthub.fr', 'first_name': 'Sarah', 'last_name': 'Lopez', 'role': UserRole.ARTIST},
    {'email': 'mike.johnson@artisthub.fr', 'first_name': 'Mike', 'last_name': 'Johnson', 'role': UserRole.ARTIST},
]

DEMO_ARTISTS = [
    {
        'owner': 'sarah.lopez@artisthub.fr',
        'stage_name': 'Sarah Lopez',
        'genre': 'Electronic Pop',
        'location': 'France',
        'bio': 'Rising electronic pop artist from France with a unique sound that blends synthwave and modern pop.',
        'total_followers': 125000,
        'monthly_listeners': 48000,
        'spotify_id': 'sarah-lopez-spotify',
        'apple_id': 'sarah-lopez-apple',
        'youtube_id': 'sarah-lopez-youtube',
        'facebook_id': 'SarahLopezMusic',
        'instagram_handle': '@sarahlopezmusic',
        'twitter_handle': '@sarahlopez',
        'tiktok_handle': '@sarahlopezmusic',
    },
    {
        'owner': 'mike.johnson@artisthub.fr',
        'stage_name': 'DJ Mike',
        'genre': 'House',
        'location': 'France',
        'bio': 'House music producer and DJ with over 10 years of experience in the electronic scene.',
        'total_followers': 89000,
        'monthly_listeners': 31000,
        'spotify_id': 'dj-mike-spotify',
        'apple_id': 'dj-mike-apple',
        'youtube_id': 'dj-mike-youtube',
        'facebook_id': 'DJMikeOfficial',
        'instagram_handle': '@djmike',
        'twitter_handle': '@djmike',
        'tiktok_handle': '@djmike',
    },
]

# (member email, role) granted on every demo artist
DEMO_MEMBERSHIPS = [
    ('marie.dubois@artisthub.fr', UserRole.MARKETING_MANAGER),
    ('paul.martin@artisthub.fr', UserRole.FINANCIAL_MANAGER),
]


class Command(BaseCommand):
    help = 'Create demo users, artists, campaigns, revenue and activity'

    def add_arguments(self, parser):
        parser.add_argument(
            '--flush',
            action='store_true',
            help='Delete existing demo data before seeding',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['flush']:
            self.flush()

        now = timezone.now()
        users = self.seed_users()
        artists = self.seed_artists(users)
        self.seed_memberships(users, artists)
        campaigns = self.seed_campaigns(users, artists, now)
        revenues = self.seed_revenue(users, artists, now)
        activities = self.seed_activities(users, artists, now)

        self.stdout.write(self.style.SUCCESS('\nDemo data seeded'))
        self.stdout.write(f'  Users: {len(users)}')
        self.stdout.write(f'  Artists: {len(artists)}')
        self.stdout.write(f'  Campaigns: {campaigns}')
        self.stdout.write(f'  Revenue streams: {revenues}')
        self.stdout.write(f'  Activities: {activities}')
        self.stdout.write(f"\nLog in with any demo email and the password '{DEMO_PASSWORD}'.")

    def flush(self):
        emails = [u['email'] for u in DEMO_USERS]
        deleted, _ = User.objects.filter(email__in=emails).delete()
        self.stdout.write(self.style.WARNING(f'Flushed {deleted} demo rows'))

    def seed_users(self):
        users = {}
        for data in DEMO_USERS:
            user, created = User.objects.get_or_create(
                email=data['email'],
                defaults={'first_name': data['first_name'], 'last_name': data['last_name']},
            )
            user.set_password(DEMO_PASSWORD)
            if data['role'] == UserRole.ADMIN:
                user.is_staff = True
                user.is_superuser = True
            user.save()

            profile = user.profile
            profile.role = data['role']
            profile.timezone = 'Europe/Paris'
            profile.is_email_verified = True
            profile.save()

            users[data['email']] = user
            self.stdout.write(f"{'Created' if created else 'Updated'} {user.email} ({data['role']})")
        return users

    def seed_artists(self, users):
        artists = []
        for data in DEMO_ARTISTS:
            fields = {k: v for k, v in data.items() if k not in ('owner', 'stage_name')}
            artist, _ = Artist.objects.update_or_create(
                stage_name=data['stage_name'],
                defaults={'user': users[data['owner']], **fields},
            )
            artists.append(artist)
        return artists

    def seed_memberships(self, users, artists):
        owner = users['sarah.lopez@artisthub.fr']
        for email, role in DEMO_MEMBERSHIPS:
            for artist in artists:
                TeamMembership.objects.update_or_create(
                    user=users[email],
                    artist=artist,
                    defaults={
                        'role': role,
                        'is_active': True,
                        'invited_by': owner,
                        'invited_at': timezone.now(),
                        'joined_at': timezone.now(),
                    },
                )

    def seed_campaigns(self, users, artists, now):
        marie = users['marie.dubois@artisthub.fr']
        sarah, mike = artists
        campaigns = [
            {
                'artist': sarah,
                'name': 'Single Release - Midnight Dreams',
                'type': 'social',
                'status': 'active',
                'platforms': ['instagram', 'tiktok', 'spotify'],
                'budget': Decimal('5000.00'),
                'spent_amount': Decimal('2150.00'),
                'start_date': now - timedelta(days=10),
                'end_date': now + timedelta(days=50),
                'description': 'Marketing campaign for the new single Midnight Dreams featuring '
                               'social media promotion and playlist pitching.',
                'goals': {'reach': 200000, 'engagement': 10000, 'conversions': 1500},
                'metrics': {'reach': 150000, 'engagement': 8500, 'conversions': 1200},
            },
            {
                'artist': sarah,
                'name': 'Newsletter - Midnight Dreams',
                'type': 'email',
                'status': 'active',
                'platforms': ['email'],
                'budget': Decimal('300.00'),
                'spent_amount': Decimal('120.00'),
                'start_date': now - timedelta(days=5),
                'end_date': now + timedelta(days=25),
                'description': 'Fan newsletter announcing the single.',
                'goals': {'sent': 10000, 'opened': 3500},
                'metrics': {'sent': 8200, 'opened': 2870},
            },
            {
                'artist': mike,
                'name': 'Summer Tour Promotion',
                'type': 'paid_ads',
                'status': 'completed',
                'platforms': ['facebook', 'instagram'],
                'budget': Decimal('8000.00'),
                'spent_amount': Decimal('7820.00'),
                'start_date': now - relativedelta(months=5),
                'end_date': now - relativedelta(months=2),
                'description': 'Comprehensive tour promotion campaign including venue partnerships '
                               'and social media advertising.',
                'goals': {'reach': 180000, 'engagement': 10000, 'conversions': 1000},
                'metrics': {'reach': 200000, 'engagement': 12000, 'conversions': 850},
            },
        ]
        for data in campaigns:
            MarketingCampaign.objects.update_or_create(
                artist=data['artist'],
                name=data['name'],
                defaults={**{k: v for k, v in data.items() if k not in ('artist', 'name')}, 'created_by': marie},
            )
        return len(campaigns)

    def seed_revenue(self, users, artists, now):
        paul = users['paul.martin@artisthub.fr']
        sarah, mike = artists
        this_month = timezone.localtime(now).date().replace(day=1)
        last_month = this_month - relativedelta(months=1)
        revenues = [
            {
                'artist': sarah,
                'source': 'streaming',
                'amount': Decimal('2500.50'),
                'date': this_month,
                'status': 'confirmed',
                'description': 'Streaming royalties from Spotify, Apple Music and YouTube Music',
                'metadata': {'platform': 'multiple', 'streams': 125000},
            },
            {
                'artist': sarah,
                'source': 'live_performance',
                'amount': Decimal('1500.00'),
                'date': this_month,
                'status': 'confirmed',
                'description': 'Performance at Le Bataclan, Paris',
                'metadata': {'venue': 'Le Bataclan', 'city': 'Paris', 'attendance': 300},
            },
            {
                'artist': mike,
                'source': 'streaming',
                'amount': Decimal('1800.75'),
                'date': this_month,
                'status': 'confirmed',
                'description': 'Streaming royalties',
                'metadata': {'platform': 'multiple', 'streams': 89000},
            },
            {
                'artist': sarah,
                'source': 'streaming',
                'amount': Decimal('2100.00'),
                'date': last_month,
                'status': 'confirmed',
                'description': 'Previous month streaming royalties',
                'metadata': {'platform': 'multiple', 'streams': 104000},
            },
            {
                'artist': mike,
                'source': 'merchandise',
                'amount': Decimal('640.00'),
                'date': this_month,
                'status': 'pending',
                'description': 'Tour merchandise',
                'is_recurring': True,
                'recurring_period': 'monthly',
                'payout_date': this_month + relativedelta(months=1),
            },
        ]
        for data in revenues:
            RevenueStream.objects.update_or_create(
                artist=data['artist'],
                source=data['source'],
                date=data['date'],
                description=data['description'],
                defaults={
                    **{k: v for k, v in data.items() if k not in ('artist', 'source', 'date', 'description')},
                    'created_by': paul,
                },
            )
        return len(revenues)

    def seed_activities(self, users, artists, now):
        marie = users['marie.dubois@artisthub.fr']
        paul = users['paul.martin@artisthub.fr']
        sarah, mike = artists
        activities = [
            {
                'artist': sarah,
                'created_by': paul,
                'type': 'revenue_received',
                'action': 'Revenus ajoutés',
                'description': 'Royalties streaming ajoutées : 2 500,50 €',
                'metadata': {'amount': 2500.50},
                'created_at': now - timedelta(hours=3),
            },
            {
                'artist': mike,
                'created_by': marie,
                'type': 'venue_booking',
                'action': 'Performance confirmée',
                'description': 'Concert au Rex Club confirmé',
                'metadata': {'venue': 'Rex Club'},
                'status': 'success',
                'created_at': now - timedelta(days=1),
            },
            {
                'artist': sarah,
                'created_by': marie,
                'type': 'social_post',
                'action': 'Teaser publié',
                'description': 'Teaser vidéo publié sur Instagram et TikTok',
                'metadata': {'platforms': ['instagram', 'tiktok']},
                'created_at': now - timedelta(days=2),
            },
        ]
        for data in activities:
            ActivityTimeline.objects.update_or_create(
                artist=data['artist'],
                action=data['action'],
                defaults={k: v for k, v in data.items() if k not in ('artist', 'action')},
            )
        return len(activities)

"""
Tests for membership resolution and per-artist permission lookups.

Tests cover:
- Active memberships plus the implicit owner membership
- Inactive memberships grant nothing
- accessible_artist_ids for admins, members, owners and outsiders
- artist_ids_with_permission judges each membership on its own artist
"""
from django.contrib.auth import get_user_model
from django.test import TestCase

from api.models import TeamMembership
from api.permissions import (
    OwnerMembership,
    accessible_artist_ids,
    artist_ids_with_permission,
    get_memberships,
    user_has_permission,
)
from api.roles import Permissions as P
from api.roles import UserRole
from identity.models import Artist

User = get_user_model()


def make_user(email, role=UserRole.ARTIST):
    user = User.objects.create_user(email=email, password='pass', first_name='Test', last_name='User')
    user.profile.role = role
    user.profile.save()
    return user


class MembershipResolutionTestCase(TestCase):

    def setUp(self):
        self.owner = make_user('sarah@example.com')
        self.other_owner = make_user('mike@example.com')
        self.manager = make_user('marie@example.com', UserRole.MARKETING_MANAGER)
        self.admin = make_user('admin@example.com', UserRole.ADMIN)
        self.outsider = make_user('nobody@example.com')

        self.sarah = Artist.objects.create(user=self.owner, stage_name='Sarah Lopez')
        self.mike = Artist.objects.create(user=self.other_owner, stage_name='DJ Mike')

        TeamMembership.objects.create(user=self.manager, artist=self.sarah, role=UserRole.MARKETING_MANAGER)
        TeamMembership.objects.create(
            user=self.manager, artist=self.mike, role=UserRole.MARKETING_MANAGER, is_active=False
        )

    def test_owner_gets_implicit_artist_membership(self):
        memberships = get_memberships(self.owner)

        self.assertEqual(memberships, [OwnerMembership(self.sarah.id, UserRole.ARTIST, {})])
        self.assertTrue(user_has_permission(self.owner, P.ARTIST_EDIT, self.sarah.id))
        self.assertFalse(user_has_permission(self.owner, P.ARTIST_VIEW, self.mike.id))

    def test_explicit_membership_replaces_owner_entry(self):
        TeamMembership.objects.create(
            user=self.owner, artist=self.sarah, role=UserRole.FINANCIAL_MANAGER
        )
        memberships = get_memberships(self.owner)

        self.assertEqual(len(memberships), 1)
        self.assertEqual(memberships[0].role, UserRole.FINANCIAL_MANAGER)

    def test_inactive_memberships_are_ignored(self):
        self.assertTrue(user_has_permission(self.manager, P.MARKETING_EDIT, self.sarah.id))
        self.assertFalse(user_has_permission(self.manager, P.MARKETING_VIEW, self.mike.id))

    def test_memberships_are_cached_on_the_user(self):
        get_memberships(self.manager)
        with self.assertNumQueries(0):
            get_memberships(self.manager)

    def test_admin_bypasses_memberships(self):
        self.assertTrue(user_has_permission(self.admin, P.FINANCIAL_DELETE, self.mike.id))

    def test_accessible_artist_ids(self):
        self.assertEqual(accessible_artist_ids(self.admin), sorted([self.sarah.id, self.mike.id]))
        self.assertEqual(accessible_artist_ids(self.manager), [self.sarah.id])
        self.assertEqual(accessible_artist_ids(self.owner), [self.sarah.id])
        self.assertEqual(accessible_artist_ids(self.outsider), [])


class ArtistIdsWithPermissionTestCase(TestCase):

    def setUp(self):
        self.owner = make_user('sarah@example.com')
        self.other_owner = make_user('mike@example.com')
        self.paul = make_user('paul@example.com', UserRole.FINANCIAL_MANAGER)
        self.admin = make_user('admin@example.com', UserRole.ADMIN)
        self.sarah = Artist.objects.create(user=self.owner, stage_name='Sarah Lopez')
        self.mike = Artist.objects.create(user=self.other_owner, stage_name='DJ Mike')

        TeamMembership.objects.create(user=self.paul, artist=self.sarah, role=UserRole.FINANCIAL_MANAGER)
        TeamMembership.objects.create(user=self.paul, artist=self.mike, role=UserRole.TOUR_MANAGER)

    def test_each_membership_is_judged_on_its_own_artist(self):
        self.assertEqual(artist_ids_with_permission(self.paul, P.FINANCIAL_CREATE), [self.sarah.id])
        self.assertEqual(
            artist_ids_with_permission(self.paul, P.FINANCIAL_VIEW),
            sorted([self.sarah.id, self.mike.id]),
        )
        self.assertEqual(artist_ids_with_permission(self.paul, P.MARKETING_VIEW), [])

    def test_owner_role_limits_what_is_visible(self):
        self.assertEqual(artist_ids_with_permission(self.owner, P.FINANCIAL_VIEW), [self.sarah.id])
        self.assertEqual(artist_ids_with_permission(self.owner, P.TOUR_VIEW), [])

    def test_admin_gets_every_artist(self):
        self.assertEqual(
            artist_ids_with_permission(self.admin, P.FINANCIAL_DELETE),
            sorted([self.sarah.id, self.mike.id]),
        )

"""
Tests for RequestLoggingMiddleware.
"""
from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework.test import APIClient

User = get_user_model()


class RequestLoggingMiddlewareTestCase(TestCase):

    def setUp(self):
        self.client = APIClient()

    def test_success_logged_at_info_with_user(self):
        user = User.objects.create_user(email='marie@example.com', password='pass', first_name='M', last_name='D')
        self.client.force_authenticate(user=user)

        with self.assertLogs('api.middleware', level='INFO') as logs:
            self.client.get('/api/v1/auth/me')

        self.assertEqual(len(logs.records), 1)
        record = logs.records[0]
        self.assertEqual(record.levelname, 'INFO')
        self.assertRegex(record.getMessage(), r'^GET /api/v1/auth/me 200 \d+ms user=marie@example.com$')

    def test_errors_logged_at_warning_as_anonymous(self):
        with self.assertLogs('api.middleware', level='INFO') as logs:
            self.client.get('/api/v1/auth/me')

        record = logs.records[0]
        self.assertEqual(record.levelname, 'WARNING')
        self.assertIn('401', record.getMessage())
        self.assertTrue(record.getMessage().endswith('user=anonymous'))

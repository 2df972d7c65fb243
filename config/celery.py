"""
Celery configuration for async task processing.
"""
import os
from celery import Celery
from celery.schedules import crontab

# Set the default Django settings module
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

# Create Celery app
app = Celery('artisthub')

# Load config from Django settings with CELERY_ prefix
app.config_from_object('django.conf:settings', namespace='CELERY')

# Auto-discover tasks in all installed apps
app.autodiscover_tasks()


# Periodic task schedule
app.conf.beat_schedule = {
    # Complete active campaigns whose end date has passed (every hour)
    'complete-ended-campaigns': {
        'task': 'campaigns.complete_ended_campaigns',
        'schedule': crontab(minute=0),
    },
}

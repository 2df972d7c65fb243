"""
Celery tasks for campaign housekeeping.
"""
import logging

from celery import shared_task
from django.utils import timezone

from .models import MarketingCampaign

logger = logging.getLogger(__name__)


@shared_task(name='campaigns.complete_ended_campaigns')
def complete_ended_campaigns():
    """
    Mark active campaigns whose end date has passed as completed.
    Runs hourly.

    Saves each campaign individually so status-change signals fire.
    """
    now = timezone.now()
    ended = MarketingCampaign.objects.filter(status='active', end_date__isnull=False, end_date__lte=now)

    completed = 0
    for campaign in ended:
        if campaign.complete_if_ended(now):
            campaign.save(update_fields=['status', 'updated_at'])
            completed += 1

    logger.info(f"Auto-completed {completed} ended campaigns")
    return f"Completed {completed} campaigns"

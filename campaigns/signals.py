"""
Campaign signals.

Tracks status changes and records a timeline entry when a campaign
goes live.
"""

import logging
from django.db.models.signals import post_save, pre_save
from django.dispatch import receiver
from .models import MarketingCampaign

logger = logging.getLogger(__name__)


@receiver(pre_save, sender=MarketingCampaign)
def track_campaign_status(sender, instance, **kwargs):
    """Track old status for change detection."""
    if instance.pk:
        instance._old_status = (
            MarketingCampaign.objects.filter(pk=instance.pk).values_list('status', flat=True).first()
        )
    else:
        instance._old_status = None


@receiver(post_save, sender=MarketingCampaign)
def on_campaign_saved(sender, instance, created, **kwargs):
    """
    Log status changes and add a campaign_launch timeline entry when a
    campaign becomes active.
    """
    old_status = getattr(instance, '_old_status', None)
    if old_status == instance.status and not created:
        return

    if old_status and old_status != instance.status:
        logger.info(
            f"Campaign {instance.id}: Status changed from '{old_status}' to '{instance.status}'"
        )

    if instance.status == 'active' and old_status != 'active':
        from timeline.models import ActivityTimeline

        ActivityTimeline.objects.create(
            artist_id=instance.artist_id,
            created_by_id=instance.created_by_id,
            type='campaign_launch',
            action=f"Campagne lancée : {instance.name}"[:200],
            description=instance.description,
            metadata={'campaign_id': instance.id, 'campaign_type': instance.type},
            related_entity_type='marketing_campaign',
            related_entity_id=str(instance.id),
        )

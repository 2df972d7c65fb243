"""
Recent activity feed for the dashboard.
"""
from datetime import datetime
from typing import Dict, List, Optional

from django.utils import timezone

from api.formatting import time_ago
from timeline.models import ActivityTimeline

NO_DETAIL = 'Aucun détail disponible'
UNKNOWN_ARTIST = 'Artiste inconnu'
UNKNOWN_AUTHOR = 'Utilisateur inconnu'


def format_activity(activity: ActivityTimeline, now: datetime) -> Dict:
    artist = activity.artist
    author = activity.created_by
    return {
        'time': time_ago(activity.created_at, now),
        'action': activity.action,
        'detail': activity.description or NO_DETAIL,
        'artist': artist.stage_name if artist else UNKNOWN_ARTIST,
        'author': (author.full_name or author.email) if author else UNKNOWN_AUTHOR,
        'type': activity.status,
        'metadata': activity.metadata or {},
    }


def recent_activities(artist_ids, limit: int, now: Optional[datetime] = None) -> List[Dict]:
    """
    Up to `limit` timeline entries for `artist_ids`, newest first.

    Labels are computed against `now` (defaults to the current time).
    """
    now = now or timezone.now()
    activities = (
        ActivityTimeline.objects
        .filter(artist_id__in=list(artist_ids))
        .select_related('artist', 'created_by')
        .order_by('-created_at', '-id')[:limit]
    )
    return [format_activity(activity, now) for activity in activities]

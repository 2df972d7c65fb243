from django.conf import settings
from django.core.validators import MaxLengthValidator, MinLengthValidator
from django.db import models
from django.utils import timezone

from api.formatting import time_ago

TYPE_ICONS = {
    'campaign_launch': '🚀',
    'email_sent': '📧',
    'social_post': '📱',
    'venue_booking': '🎤',
    'contract_signed': '📝',
    'revenue_received': '💰',
    'expense_logged': '💸',
    'document_uploaded': '📄',
    'team_invite': '👥',
    'report_generated': '📊',
    'other': '📌',
}

STATUS_COLORS = {
    'info': 'blue',
    'success': 'emerald',
    'warning': 'amber',
    'error': 'red',
}

PRIORITY_COLORS = {
    'low': 'gray',
    'medium': 'blue',
    'high': 'amber',
    'urgent': 'red',
}


class ActivityTimeline(models.Model):
    """
    One entry in an artist's activity feed.

    status and priority are adjusted on creation for a few types (see
    apply_type_defaults); later edits keep whatever is stored.
    """

    TYPE_CHOICES = [
        ('campaign_launch', 'Campagne lancée'),
        ('email_sent', 'Email envoyé'),
        ('social_post', 'Publication sociale'),
        ('venue_booking', 'Venue réservée'),
        ('contract_signed', 'Contrat signé'),
        ('revenue_received', 'Revenus reçus'),
        ('expense_logged', 'Dépense enregistrée'),
        ('document_uploaded', 'Document ajouté'),
        ('team_invite', 'Invitation équipe'),
        ('report_generated', 'Rapport généré'),
        ('other', 'Autre'),
    ]

    PRIORITY_CHOICES = [
        ('low', 'Low'),
        ('medium', 'Medium'),
        ('high', 'High'),
        ('urgent', 'Urgent'),
    ]

    STATUS_CHOICES = [
        ('info', 'Info'),
        ('success', 'Success'),
        ('warning', 'Warning'),
        ('error', 'Error'),
    ]

    artist = models.ForeignKey(
        'identity.Artist',
        on_delete=models.CASCADE,
        related_name='activities'
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='created_activities'
    )

    type = models.CharField(max_length=30, choices=TYPE_CHOICES)
    action = models.CharField(max_length=200, validators=[MinLengthValidator(3)])
    description = models.TextField(blank=True, validators=[MaxLengthValidator(1000)])
    metadata = models.JSONField(default=dict, blank=True)

    related_entity_type = models.CharField(
        max_length=50,
        blank=True,
        help_text="Kind of record this entry refers to (e.g. marketing_campaign)"
    )
    related_entity_id = models.CharField(max_length=64, blank=True)

    priority = models.CharField(max_length=10, choices=PRIORITY_CHOICES, default='medium')
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='info')
    is_public = models.BooleanField(default=False)

    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Activity"
        verbose_name_plural = "Activity Timeline"
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['artist', 'created_at'], name='timeline_ac_artist__2b3c4d_idx'),
            models.Index(fields=['artist', 'type'], name='timeline_ac_artist__5e6f7a_idx'),
            models.Index(fields=['artist', 'is_public'], name='timeline_ac_artist__8b9c0d_idx'),
            models.Index(fields=['related_entity_type', 'related_entity_id'], name='timeline_ac_related_1e2f3a_idx'),
        ]

    def __str__(self):
        return f"{self.get_type_display()}: {self.action}"

    def apply_type_defaults(self):
        if self.type == 'revenue_received':
            self.status = 'success'
        elif self.type == 'expense_logged':
            self.status = 'warning'
        elif self.type == 'contract_signed':
            self.status = 'success'
            self.priority = 'high'

    def save(self, *args, **kwargs):
        if self._state.adding:
            self.apply_type_defaults()
        super().save(*args, **kwargs)

    def time_ago(self, now=None):
        return time_ago(self.created_at, now or timezone.now())

    @property
    def icon(self):
        return TYPE_ICONS.get(self.type, '📌')

    @property
    def type_label(self):
        return dict(self.TYPE_CHOICES).get(self.type, self.type)

    @property
    def status_color(self):
        return STATUS_COLORS.get(self.status, 'gray')

    @property
    def priority_color(self):
        return PRIORITY_COLORS.get(self.priority, 'gray')

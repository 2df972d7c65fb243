import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('identity', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='ActivityTimeline',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('type', models.CharField(choices=[('campaign_launch', 'Campagne lancée'), ('email_sent', 'Email envoyé'), ('social_post', 'Publication sociale'), ('venue_booking', 'Venue réservée'), ('contract_signed', 'Contrat signé'), ('revenue_received', 'Revenus reçus'), ('expense_logged', 'Dépense enregistrée'), ('document_uploaded', 'Document ajouté'), ('team_invite', 'Invitation équipe'), ('report_generated', 'Rapport généré'), ('other', 'Autre')], max_length=30)),
                ('action', models.CharField(max_length=200, validators=[django.core.validators.MinLengthValidator(3)])),
                ('description', models.TextField(blank=True, validators=[django.core.validators.MaxLengthValidator(1000)])),
                ('metadata', models.JSONField(blank=True, default=dict)),
                ('related_entity_type', models.CharField(blank=True, help_text='Kind of record this entry refers to (e.g. marketing_campaign)', max_length=50)),
                ('related_entity_id', models.CharField(blank=True, max_length=64)),
                ('priority', models.CharField(choices=[('low', 'Low'), ('medium', 'Medium'), ('high', 'High'), ('urgent', 'Urgent')], default='medium', max_length=10)),
                ('status', models.CharField(choices=[('info', 'Info'), ('success', 'Success'), ('warning', 'Warning'), ('error', 'Error')], default='info', max_length=10)),
                ('is_public', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('artist', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='activities', to='identity.artist')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='created_activities', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Activity',
                'verbose_name_plural': 'Activity Timeline',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['artist', 'created_at'], name='timeline_ac_artist__2b3c4d_idx'),
                    models.Index(fields=['artist', 'type'], name='timeline_ac_artist__5e6f7a_idx'),
                    models.Index(fields=['artist', 'is_public'], name='timeline_ac_artist__8b9c0d_idx'),
                    models.Index(fields=['related_entity_type', 'related_entity_id'], name='timeline_ac_related_1e2f3a_idx'),
                ],
            },
        ),
    ]

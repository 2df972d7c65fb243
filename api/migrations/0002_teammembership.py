import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('api', '0001_initial'),
        ('identity', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='TeamMembership',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('role', models.CharField(choices=[('artist', 'Artist'), ('marketing_manager', 'Marketing Manager'), ('tour_manager', 'Tour Manager'), ('album_manager', 'Album Manager'), ('financial_manager', 'Financial Manager'), ('press_officer', 'Press Officer'), ('admin', 'Administrator')], help_text="Role within this artist's team", max_length=30)),
                ('permissions', models.JSONField(blank=True, default=dict, help_text='Custom permission overrides; any key present is granted')),
                ('is_active', models.BooleanField(default=True)),
                ('invited_at', models.DateTimeField(blank=True, null=True)),
                ('joined_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('artist', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='team_memberships', to='identity.artist')),
                ('invited_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='sent_team_invitations', to=settings.AUTH_USER_MODEL)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='team_memberships', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Team Membership',
                'verbose_name_plural': 'Team Memberships',
                'ordering': ['artist', 'user'],
                'indexes': [
                    models.Index(fields=['user', 'is_active'], name='api_teammem_user_id_3b9f0c_idx'),
                    models.Index(fields=['artist', 'role'], name='api_teammem_artist__7d2e41_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(fields=('user', 'artist'), name='unique_user_artist_membership'),
                ],
            },
        ),
    ]

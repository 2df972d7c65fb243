from django.contrib import admin
from .models import User, UserProfile, TeamMembership


class UserProfileInline(admin.StackedInline):
    """Inline admin for UserProfile within User admin."""
    model = UserProfile
    can_delete = False
    verbose_name = 'Profile'
    verbose_name_plural = 'Profile'
    fields = ['role', 'phone', 'timezone', 'avatar', 'is_email_verified', 'token_version']
    readonly_fields = ['token_version']


class TeamMembershipInline(admin.TabularInline):
    model = TeamMembership
    fk_name = 'user'
    extra = 0
    fields = ['artist', 'role', 'is_active', 'joined_at']


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    """User admin with profile and team information."""
    list_display = ['email', 'first_name', 'last_name', 'get_role', 'is_active', 'date_joined']
    list_filter = ['is_active', 'profile__role']
    search_fields = ['email', 'first_name', 'last_name']
    inlines = [UserProfileInline, TeamMembershipInline]
    ordering = ['-date_joined']
    exclude = ['password', 'groups', 'user_permissions']

    def get_role(self, obj):
        return obj.profile.get_role_display() if hasattr(obj, 'profile') else 'No Profile'
    get_role.short_description = 'Role'
    get_role.admin_order_field = 'profile__role'


@admin.register(TeamMembership)
class TeamMembershipAdmin(admin.ModelAdmin):
    list_display = ['user', 'artist', 'role', 'is_active', 'joined_at']
    list_filter = ['role', 'is_active']
    search_fields = ['user__email', 'artist__stage_name']
    raw_id_fields = ['user', 'artist', 'invited_by']

from django.conf import settings
from django.contrib.auth.base_user import AbstractBaseUser, BaseUserManager
from django.contrib.auth.models import PermissionsMixin
from django.core.validators import RegexValidator
from django.db import models
from django.db.models.signals import post_save
from django.dispatch import receiver
from django.utils import timezone

from .roles import UserRole


class UserManager(BaseUserManager):
    """
    Manager for the email-keyed User model.
    """
    use_in_migrations = True

    def _create_user(self, email, password, **extra_fields):
        if not email:
            raise ValueError("The email address must be set")
        email = self.normalize_email(email).lower()
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', False)
        extra_fields.setdefault('is_superuser', False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)

        if extra_fields.get('is_staff') is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get('is_superuser') is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self._create_user(email, password, **extra_fields)

    def get_by_natural_key(self, email):
        return self.get(**{f'{self.model.USERNAME_FIELD}__iexact': email})


class User(AbstractBaseUser, PermissionsMixin):
    """
    Account identified by email. Emails are stored lowercase so lookups and
    the uniqueness constraint are case-insensitive.
    """

    email = models.EmailField(
        unique=True,
        help_text="Login email, stored lowercase"
    )
    first_name = models.CharField(max_length=50)
    last_name = models.CharField(max_length=50)
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(
        default=False,
        help_text="Can log into the Django admin"
    )
    last_login_at = models.DateTimeField(null=True, blank=True)
    date_joined = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = ['first_name', 'last_name']

    class Meta:
        verbose_name = "User"
        verbose_name_plural = "Users"
        ordering = ['email']

    def __str__(self):
        return self.email

    def save(self, *args, **kwargs):
        if self.email:
            self.email = self.email.strip().lower()
        super().save(*args, **kwargs)

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    def get_full_name(self):
        return self.full_name

    def get_short_name(self):
        return self.first_name


class UserProfile(models.Model):
    """
    Per-user settings and the account-level role.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='profile'
    )

    role = models.CharField(
        max_length=30,
        choices=UserRole.choices,
        default=UserRole.ARTIST,
        help_text="Account-level role; drives dashboard cards and quick actions"
    )

    phone = models.CharField(
        max_length=16,
        blank=True,
        validators=[
            RegexValidator(r'^\+?[1-9]\d{0,15}$', "Enter a valid phone number.")
        ],
    )

    timezone = models.CharField(max_length=50, default='UTC')

    avatar = models.URLField(
        max_length=500,
        blank=True,
        help_text="Avatar image URL"
    )

    is_email_verified = models.BooleanField(default=False)

    token_version = models.PositiveIntegerField(
        default=0,
        help_text="Incremented on logout; refresh tokens carrying an older version are rejected"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "User Profile"
        verbose_name_plural = "User Profiles"
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['role'], name='api_userpro_role_5f0f1e_idx'),
        ]

    def __str__(self):
        return f"{self.user.email} - {self.get_role_display()}"

    @property
    def full_name(self):
        return self.user.full_name

    @property
    def is_admin(self):
        """Check if user holds the administrator role."""
        return self.role == UserRole.ADMIN


class TeamMembership(models.Model):
    """
    Binds a user to an artist's team with a role and optional custom
    permissions. Only active memberships grant anything.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='team_memberships'
    )
    artist = models.ForeignKey(
        'identity.Artist',
        on_delete=models.CASCADE,
        related_name='team_memberships'
    )
    role = models.CharField(
        max_length=30,
        choices=UserRole.choices,
        help_text="Role within this artist's team"
    )
    permissions = models.JSONField(
        default=dict,
        blank=True,
        help_text="Custom permission overrides; any key present is granted"
    )
    is_active = models.BooleanField(default=True)
    invited_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='sent_team_invitations'
    )
    invited_at = models.DateTimeField(null=True, blank=True)
    joined_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Team Membership"
        verbose_name_plural = "Team Memberships"
        ordering = ['artist', 'user']
        constraints = [
            models.UniqueConstraint(fields=['user', 'artist'], name='unique_user_artist_membership'),
        ]
        indexes = [
            models.Index(fields=['user', 'is_active'], name='api_teammem_user_id_3b9f0c_idx'),
            models.Index(fields=['artist', 'role'], name='api_teammem_artist__7d2e41_idx'),
        ]

    def __str__(self):
        return f"{self.user.email} @ {self.artist_id} ({self.role})"


@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def create_user_profile(sender, instance, created, **kwargs):
    """
    Create a UserProfile with the default role whenever a user is created.
    """
    if created:
        UserProfile.objects.get_or_create(user=instance)

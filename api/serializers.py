import re

from django.contrib.auth import get_user_model
from rest_framework import serializers

from .roles import UserRole

User = get_user_model()

PASSWORD_PATTERN = re.compile(r'^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]')


class UserSerializer(serializers.ModelSerializer):
    """Serializer for the authenticated user, camelCase for the frontend."""
    firstName = serializers.CharField(source='first_name', read_only=True)
    lastName = serializers.CharField(source='last_name', read_only=True)
    role = serializers.SerializerMethodField()
    phone = serializers.SerializerMethodField()
    avatar = serializers.SerializerMethodField()
    timezone = serializers.SerializerMethodField()
    emailVerified = serializers.SerializerMethodField()
    isActive = serializers.BooleanField(source='is_active', read_only=True)
    lastLoginAt = serializers.DateTimeField(source='last_login_at', read_only=True)
    createdAt = serializers.DateTimeField(source='date_joined', read_only=True)

    class Meta:
        model = User
        fields = [
            'id', 'email', 'firstName', 'lastName', 'role', 'phone', 'avatar',
            'timezone', 'emailVerified', 'isActive', 'lastLoginAt', 'createdAt',
        ]
        read_only_fields = fields

    def _profile(self, obj):
        return getattr(obj, 'profile', None)

    def get_role(self, obj):
        profile = self._profile(obj)
        return profile.role if profile else UserRole.ARTIST.value

    def get_phone(self, obj):
        profile = self._profile(obj)
        return profile.phone or None if profile else None

    def get_avatar(self, obj):
        profile = self._profile(obj)
        return profile.avatar or None if profile else None

    def get_timezone(self, obj):
        profile = self._profile(obj)
        return profile.timezone if profile else 'UTC'

    def get_emailVerified(self, obj):
        profile = self._profile(obj)
        return profile.is_email_verified if profile else False


class RegisterSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(min_length=8, write_only=True, trim_whitespace=False)
    firstName = serializers.CharField(min_length=2, max_length=50)
    lastName = serializers.CharField(min_length=2, max_length=50)
    phone = serializers.RegexField(r'^\+?[1-9]\d{1,14}$', required=False, allow_blank=True)
    role = serializers.ChoiceField(
        choices=[choice for choice in UserRole.choices if choice[0] != UserRole.ADMIN],
        required=False,
        default=UserRole.ARTIST,
    )

    def validate_email(self, value):
        return value.strip().lower()

    def validate_password(self, value):
        if not PASSWORD_PATTERN.match(value):
            raise serializers.ValidationError(
                "Password must contain at least one uppercase letter, one lowercase letter, "
                "one number, and one special character"
            )
        return value

    def create(self, validated_data):
        user = User.objects.create_user(
            email=validated_data['email'],
            password=validated_data['password'],
            first_name=validated_data['firstName'],
            last_name=validated_data['lastName'],
        )
        profile = user.profile
        profile.role = validated_data.get('role', UserRole.ARTIST)
        profile.phone = validated_data.get('phone', '')
        profile.save(update_fields=['role', 'phone', 'updated_at'])
        return user


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)

    def validate_email(self, value):
        return value.strip().lower()


class RefreshTokenSerializer(serializers.Serializer):
    refreshToken = serializers.CharField()


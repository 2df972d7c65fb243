from django.conf import settings
from django.contrib.auth.hashers import BCryptSHA256PasswordHasher


class ConfigurableBCryptSHA256PasswordHasher(BCryptSHA256PasswordHasher):
    """
    bcrypt hasher whose cost factor comes from the BCRYPT_ROUNDS setting.
    """

    @property
    def rounds(self):
        return getattr(settings, 'BCRYPT_ROUNDS', 12)

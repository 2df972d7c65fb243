"""
Django settings for the ArtistHub API.

Every value is read from the environment (or a .env file) through
python-decouple so the same module serves development, test and production.
"""
from pathlib import Path

from decouple import config, Csv
from django.core.exceptions import ImproperlyConfigured

BASE_DIR = Path(__file__).resolve().parent.parent

DJANGO_ENV = config('DJANGO_ENV', default='development')
IS_PRODUCTION = DJANGO_ENV == 'production'

# Required environment variables; production also needs the database and Redis
REQUIRED_ENV_VARS = ['JWT_SECRET']
if IS_PRODUCTION:
    REQUIRED_ENV_VARS += ['DB_HOST', 'DB_NAME', 'DB_USERNAME', 'DB_PASSWORD', 'REDIS_HOST']

    missing = [name for name in REQUIRED_ENV_VARS if not config(name, default='')]
    if missing:
        raise ImproperlyConfigured(
            f"Missing required environment variable(s): {', '.join(missing)}"
        )

SECRET_KEY = config('SECRET_KEY', default='django-insecure-artisthub-dev-key')
DEBUG = config('DEBUG', default=not IS_PRODUCTION, cast=bool)
ALLOWED_HOSTS = config('ALLOWED_HOSTS', default='localhost,127.0.0.1,testserver', cast=Csv())

APP_NAME = config('APP_NAME', default='ArtistHub API')
APP_VERSION = config('APP_VERSION', default='1.0.0')
API_PREFIX = config('API_PREFIX', default='/api/v1')
API_VERSION = 'v1'


# Application definition

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    # Third party
    'rest_framework',
    'django_filters',
    'corsheaders',

    # Local apps
    'api',
    'identity',
    'campaigns',
    'revenue',
    'timeline',
    'dashboard',
]

MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    'api.middleware.RequestLoggingMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'config.wsgi.application'
ASGI_APPLICATION = 'config.asgi.application'

AUTH_USER_MODEL = 'api.User'


# Database
# The connection lifetime and connect timeout are the only pool bounds we
# manage; everything else is left to the driver.

DB_ENGINE = config('DB_ENGINE', default='sqlite')

if DB_ENGINE == 'postgresql':
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': config('DB_NAME', default='artisthub_dev'),
            'USER': config('DB_USERNAME', default='postgres'),
            'PASSWORD': config('DB_PASSWORD', default='password'),
            'HOST': config('DB_HOST', default='localhost'),
            'PORT': config('DB_PORT', default=5432, cast=int),
            'CONN_MAX_AGE': config('DB_CONN_MAX_AGE', default=60, cast=int),
            'OPTIONS': {
                'connect_timeout': config('DB_CONNECT_TIMEOUT', default=30, cast=int),
            },
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / config('DB_NAME', default='db.sqlite3'),
        }
    }

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'


# Cache and broker (Redis when configured)

REDIS_HOST = config('REDIS_HOST', default='')
REDIS_PORT = config('REDIS_PORT', default=6379, cast=int)
REDIS_DB = config('REDIS_DB', default=0, cast=int)
REDIS_PASSWORD = config('REDIS_PASSWORD', default='')

if REDIS_HOST:
    _redis_auth = f':{REDIS_PASSWORD}@' if REDIS_PASSWORD else ''
    REDIS_URL = f'redis://{_redis_auth}{REDIS_HOST}:{REDIS_PORT}/{REDIS_DB}'
    CACHES = {
        'default': {
            'BACKEND': 'django.core.cache.backends.redis.RedisCache',
            'LOCATION': REDIS_URL,
        }
    }
    CELERY_BROKER_URL = REDIS_URL
else:
    CACHES = {
        'default': {
            'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
            'LOCATION': 'artisthub',
        }
    }
    CELERY_BROKER_URL = 'memory://'
    # Local-memory cache is per process; rate limits are approximate without Redis
    SILENCED_SYSTEM_CHECKS = ['django_ratelimit.E003', 'django_ratelimit.W001']

CELERY_TASK_ALWAYS_EAGER = config('CELERY_TASK_ALWAYS_EAGER', default=False, cast=bool)
CELERY_TIMEZONE = 'UTC'


# Password hashing

BCRYPT_ROUNDS = config('BCRYPT_ROUNDS', default=12, cast=int)

PASSWORD_HASHERS = [
    'api.hashers.ConfigurableBCryptSHA256PasswordHasher',
    'django.contrib.auth.hashers.PBKDF2PasswordHasher',
]

AUTH_PASSWORD_VALIDATORS = [
    {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator'},
]


# JWT

JWT_SECRET = config('JWT_SECRET', default='artisthub-dev-secret-key-change-me')
JWT_ALGORITHM = 'HS256'
JWT_ACCESS_EXPIRY = config('JWT_ACCESS_EXPIRY', default='24h')
JWT_REFRESH_EXPIRY = config('JWT_REFRESH_EXPIRY', default='7d')
JWT_ISSUER = config('JWT_ISSUER', default='artisthub-api')


# CORS

CORS_ALLOWED_ORIGINS = config('CORS_ORIGIN', default='http://localhost:3000', cast=Csv())
CORS_ALLOW_CREDENTIALS = True


# Rate limiting (django-ratelimit)

RATE_LIMIT_WINDOW_MS = config('RATE_LIMIT_WINDOW_MS', default=900000, cast=int)
RATE_LIMIT_MAX_REQUESTS = config('RATE_LIMIT_MAX_REQUESTS', default=100, cast=int)
AUTH_RATE_LIMIT = f'{RATE_LIMIT_MAX_REQUESTS}/{max(RATE_LIMIT_WINDOW_MS // 1000, 1)}s'
RATELIMIT_ENABLE = config('RATELIMIT_ENABLE', default=True, cast=bool)


# Django REST Framework

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'api.authentication.JWTAuthentication',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticated',
    ],
    'DEFAULT_FILTER_BACKENDS': [
        'django_filters.rest_framework.DjangoFilterBackend',
        'rest_framework.filters.SearchFilter',
        'rest_framework.filters.OrderingFilter',
    ],
    'DEFAULT_PAGINATION_CLASS': 'rest_framework.pagination.PageNumberPagination',
    'PAGE_SIZE': 20,
    'EXCEPTION_HANDLER': 'api.exceptions.envelope_exception_handler',
    'UNAUTHENTICATED_USER': 'django.contrib.auth.models.AnonymousUser',
}


# Internationalization

LANGUAGE_CODE = 'fr-fr'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True


# Static files

STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'


# Logging

LOG_LEVEL = config('LOG_LEVEL', default='INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '[%(asctime)s] %(levelname)s - %(name)s.%(funcName)s(): %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S %z',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
            'level': 'DEBUG',
        },
    },
    'loggers': {
        'api': {'level': LOG_LEVEL, 'handlers': ['console'], 'propagate': False},
        'identity': {'level': LOG_LEVEL, 'handlers': ['console'], 'propagate': False},
        'campaigns': {'level': LOG_LEVEL, 'handlers': ['console'], 'propagate': False},
        'revenue': {'level': LOG_LEVEL, 'handlers': ['console'], 'propagate': False},
        'timeline': {'level': LOG_LEVEL, 'handlers': ['console'], 'propagate': False},
        'dashboard': {'level': LOG_LEVEL, 'handlers': ['console'], 'propagate': False},
        # Authentication events (login attempts, refreshes, denied access)
        'security': {'level': LOG_LEVEL, 'handlers': ['console'], 'propagate': False},
        'celery': {'level': LOG_LEVEL, 'handlers': ['console'], 'propagate': False},
    },
    'root': {'level': 'WARNING', 'handlers': ['console']},
}

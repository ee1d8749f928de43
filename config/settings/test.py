"""
Test settings.
"""
from .base import *  # noqa: F401,F403

DEBUG = False

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
    }
}

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

PAYMENT_SIMULATION_DELAY_SECONDS = 0
ORDER_DUPLICATE_WINDOW_MINUTES = 5

# Application loggers propagate to the root logger so pytest can capture them.
for _logger_name in ('modules', 'shared'):
    LOGGING['loggers'][_logger_name].update({'handlers': [], 'propagate': True})

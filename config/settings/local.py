"""
Local development settings.
"""
from .base import *  # noqa: F401,F403

DEBUG = env_bool('DJANGO_DEBUG', True)  # noqa: F405

ALLOWED_HOSTS = ['*']

REST_FRAMEWORK['DEFAULT_RENDERER_CLASSES'] = [  # noqa: F405
    'rest_framework.renderers.JSONRenderer',
    'rest_framework.renderers.BrowsableAPIRenderer',
]

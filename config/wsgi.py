"""
WSGI config for the storefront order service.

Run under a threaded worker pool so the simulated payment latency only
holds the worker thread serving that request.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.local')

application = get_wsgi_application()

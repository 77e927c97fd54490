"""ASGI entry point for MauriRent (uvicorn, daphne).

Servers pick the settings module through ``DJANGO_SETTINGS_MODULE``;
production is the default.
"""

import os
from django.core.asgi import get_asgi_application  # type: ignore

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.prod')

application = get_asgi_application()

"""Development settings for MauriRent.

Debug on, every host allowed, mail printed to the console. Celery tasks
run inline unless ``CELERY_TASK_ALWAYS_EAGER=false`` is exported, so a
local Redis is optional.
"""

from .base import *  # noqa: F401,F403

DEBUG = True

ALLOWED_HOSTS = ['*']

EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'

CELERY_TASK_ALWAYS_EAGER = os.environ.get('CELERY_TASK_ALWAYS_EAGER', 'true').lower() == 'true'

CORS_ALLOW_ALL_ORIGINS = True

"""Test settings for MauriRent project.

Uses a throwaway file-backed SQLite database, runs Celery tasks eagerly and keeps
outgoing mail in ``django.core.mail.outbox``.
"""

import tempfile

from .base import *  # noqa: F401,F403

DEBUG = False

# File-backed so threads get separate connections with SQLite's regular
# database locking; in-memory databases fall back to shared-cache table locks.
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
        'TEST': {
            'NAME': str(Path(tempfile.gettempdir()) / 'maurirent-test.sqlite3'),
        },
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'

MEDIA_ROOT = Path(tempfile.mkdtemp(prefix='maurirent-media-'))

STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
    },
}

# Celery runs inline in tests
CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True
CELERY_BROKER_URL = 'memory://'
CELERY_RESULT_BACKEND = 'cache+memory://'

STRIPE_SECRET_KEY = 'sk_test_dummy'

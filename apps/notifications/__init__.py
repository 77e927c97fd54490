"""Notifications app package.

Delivers outgoing email (support alerts, support replies, password reset
links). Messages are sent by Celery tasks defined in ``tasks.py``.
"""

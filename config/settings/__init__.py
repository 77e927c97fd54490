"""MauriRent settings.

``base`` holds everything shared; ``dev``, ``test`` and ``prod`` star-import
it and override per environment.
"""

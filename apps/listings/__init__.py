"""Listings app package.

Holds rental listings published by hosts, their photos and the admin
approval workflow. Only approved listings are shown in the public
catalogue.
"""

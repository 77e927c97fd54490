"""Bookings app package.

Contains the booking model and the availability engine in ``services.py``:
overlap checks, booking creation under a per-listing lock, payment
confirmation, deletion and the booked-dates calendar feed.
"""

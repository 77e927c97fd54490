"""Payments app package.

Payments go through Stripe Checkout. A checkout session is opened for a
booking; when the customer returns from Stripe the session is verified,
the booking is marked as paid and a completed payment is recorded.
"""

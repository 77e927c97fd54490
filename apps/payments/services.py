"""Stripe Checkout integration."""

from __future__ import annotations

import logging
from typing import Any

import stripe  # type: ignore
from django.conf import settings  # type: ignore
from django.db import transaction  # type: ignore

from apps.bookings.models import Booking
from apps.bookings.services import BookingNotFoundError, mark_paid

from .models import Payment

logger = logging.getLogger(__name__)


class CheckoutError(Exception):
    """Raised when Stripe rejects or fails a request."""


class PaymentNotCompletedError(Exception):
    """Raised when a checkout session has not been paid."""


def create_checkout_session(booking: Booking) -> str:
    """
    Opens a Stripe Checkout session for the booking total.

    The booking id travels as ``client_reference_id`` so the success
    callback can find the booking again. A pending payment is recorded.

    Returns:
        str: Stripe session id
    """
    try:
        session = stripe.checkout.Session.create(
            api_key=settings.STRIPE_SECRET_KEY,
            payment_method_types=["card"],
            line_items=[
                {
                    "price_data": {
                        "currency": settings.STRIPE_CURRENCY,
                        "product_data": {"name": settings.STRIPE_PRODUCT_NAME},
                        "unit_amount": booking.total_price_cents,
                    },
                    "quantity": 1,
                }
            ],
            mode="payment",
            success_url=f"{settings.CLIENT_URL}/payment-success?session_id={{CHECKOUT_SESSION_ID}}",
            cancel_url=f"{settings.CLIENT_URL}/payment-cancel",
            client_reference_id=str(booking.pk),
        )
    except stripe.StripeError as e:
        logger.error(f"Stripe checkout session failed for booking {booking.pk}: {e}", exc_info=True)
        raise CheckoutError(str(e)) from e

    Payment.objects.create(
        user_id=booking.customer_id,
        listing_id=booking.listing_id,
        booking=booking,
        price_paid=booking.total_price,
        checkout_session_id=session.id,
    )
    logger.info(f"Checkout session {session.id} opened for booking {booking.pk}")
    return session.id


def confirm_checkout_session(session_id: str) -> Payment:
    """
    Verifies a paid checkout session and marks its booking as paid.

    Stripe is queried before any transaction is opened; only the booking
    update and the payment write share one.

    Raises:
        CheckoutError: Stripe could not be reached or rejected the id
        PaymentNotCompletedError: the session is not paid yet
        BookingNotFoundError: the referenced booking no longer exists
    """
    try:
        session = stripe.checkout.Session.retrieve(session_id, api_key=settings.STRIPE_SECRET_KEY)
    except stripe.StripeError as e:
        logger.error(f"Stripe session lookup failed for {session_id}: {e}", exc_info=True)
        raise CheckoutError(str(e)) from e

    if session.payment_status != "paid":
        raise PaymentNotCompletedError(f"Checkout session {session_id} is {session.payment_status}.")

    reference = session.client_reference_id
    if not reference or not str(reference).isdigit():
        raise BookingNotFoundError()

    with transaction.atomic():
        booking = mark_paid(int(reference))
        payment, _ = Payment.objects.get_or_create(
            checkout_session_id=session_id,
            defaults={
                "user_id": booking.customer_id,
                "listing_id": booking.listing_id,
                "booking": booking,
                "price_paid": booking.total_price,
            },
        )
        payment.mark_completed()

    logger.info(f"Payment {payment.pk} completed for booking {booking.pk}")
    return payment


def payment_details(payment: Payment) -> dict[str, Any]:
    """Summary shown on the payment success page."""
    listing = payment.listing
    host = listing.creator if listing else None
    return {
        "listingTitle": listing.title if listing else None,
        "userName": host.full_name if host else None,
        "pricePaid": payment.price_paid,
        "paymentDate": payment.payment_date,
    }

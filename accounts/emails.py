"""Outgoing account emails: password reset links and signup notifications."""
import logging
from urllib.parse import urlencode

from django.conf import settings
from django.core.mail import send_mail
from django.template.loader import render_to_string

logger = logging.getLogger(__name__)


def build_reset_url(uid, token):
    base = settings.CLIENT_URL.rstrip('/')
    return f"{base}/reset-password?{urlencode({'uid': uid, 'token': token})}"


def send_password_reset_email(email, uid, token):
    """Send the reset link. Raises on transport failure; callers decide what to expose."""
    reset_url = build_reset_url(uid, token)
    if settings.DEBUG:
        logger.info("Password reset link (dev): %s", reset_url)

    context = {
        'reset_url': reset_url,
        'expires_minutes': settings.PASSWORD_RESET_TIMEOUT // 60,
    }
    send_mail(
        subject='Reset Your Password',
        message=render_to_string('accounts/emails/password_reset.txt', context),
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[email],
        html_message=render_to_string('accounts/emails/password_reset.html', context),
    )


def send_admin_signup_email(email):
    """Tell the operator about a new account. Never raises."""
    admin_email = settings.ADMIN_SIGNUP_EMAIL
    if not admin_email:
        logger.debug("ADMIN_EMAIL not set; skipping signup notification for %s", email)
        return

    try:
        send_mail(
            subject='New DRD Fitness signup',
            message=render_to_string('accounts/emails/admin_signup.txt', {'email': email}),
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[admin_email],
        )
    except Exception:
        logger.exception("Failed to send admin signup email for %s", email)

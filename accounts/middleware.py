import logging
import uuid

from django.contrib.auth import SESSION_KEY

logger = logging.getLogger(__name__)


def has_valid_session_user(session):
    """True when the session names a user by a well-formed UUID.

    A session holding anything else is flushed.
    """
    raw_id = session.get(SESSION_KEY)
    if raw_id is None:
        return False
    try:
        uuid.UUID(str(raw_id))
    except ValueError:
        logger.info("Flushing session with malformed user id")
        session.flush()
        return False
    return True


class SessionUserGuardMiddleware:
    """Drop sessions whose user id can't be a primary key.

    Must run after ``SessionMiddleware`` and before ``AuthenticationMiddleware``,
    so ``request.user`` never tries to load one.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        has_valid_session_user(request.session)
        return self.get_response(request)

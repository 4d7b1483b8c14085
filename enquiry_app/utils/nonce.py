# enquiry_app/utils/nonce.py
# Per-action anti-forgery tokens.
# A token is the action name signed with the app SECRET_KEY (itsdangerous,
# salted per action) plus a timestamp, so a token minted for one action is
# useless for another and expires after ENQUIRY_NONCE_MAX_AGE seconds.

import logging

from flask import current_app
from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

logger = logging.getLogger(__name__)

NONCE_SALT_PREFIX = 'enquiry-nonce:'


def _serializer(action: str) -> URLSafeTimedSerializer:
    return URLSafeTimedSerializer(
        current_app.config['SECRET_KEY'],
        salt=f'{NONCE_SALT_PREFIX}{action}',
    )


def create_nonce(action: str) -> str:
    return _serializer(action).dumps(action)


def verify_nonce(token: str | None, action: str, max_age: int | None = None) -> bool:
    """True only for an unexpired token minted for exactly this action."""
    if not token:
        return False

    if max_age is None:
        max_age = current_app.config.get('ENQUIRY_NONCE_MAX_AGE', 24 * 3600)

    try:
        payload = _serializer(action).loads(token, max_age=max_age)
    except SignatureExpired:
        logger.info(f"Expired nonce for action {action!r}")
        return False
    except BadSignature:
        return False

    return payload == action

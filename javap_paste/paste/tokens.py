import re
import uuid

from javap_paste.paste.exceptions import InvalidTokenError

TOKEN_PATTERN = re.compile(r"[A-Za-z0-9_\-.]+")

PASTE_ID_LENGTH = 16


def validate_token(token: str | None) -> str:
    """Return the token if it may own pastes.

    Raises:
        InvalidTokenError: if the token is absent, empty or has
            characters outside TOKEN_PATTERN.
    """
    if not token:
        raise InvalidTokenError("Missing user token")
    if not TOKEN_PATTERN.fullmatch(token):
        raise InvalidTokenError("Invalid user token")
    return token


def generate_paste_id() -> str:
    return uuid.uuid4().hex[:PASTE_ID_LENGTH]

"""
Avatar Service
==============
Turns uploaded images into inline display references (data URLs) and
attaches them to consultants.

Format checking happens here. The ledger stores the resulting string
as-is and never looks inside it.
"""

import base64
import logging
from typing import Optional

from models.ledger import Ledger
from services.ledger_service import find_consultant, set_avatar

_logger = logging.getLogger(__name__)

ALLOWED_AVATAR_TYPES = frozenset({"image/png", "image/jpeg", "image/jpg"})

# Extensions accepted by the upload widget
AVATAR_EXTENSIONS = ["png", "jpg", "jpeg"]


class UnsupportedAvatarType(Exception):
    """Raised when an upload is not a PNG or JPEG image."""
    pass


def encode_avatar(data: bytes, content_type: Optional[str]) -> str:
    """
    Encode image bytes as a data URL.

    Raises:
        UnsupportedAvatarType: If content_type is not PNG/JPEG or data is empty
    """
    mime = (content_type or "").strip().lower()
    if mime not in ALLOWED_AVATAR_TYPES:
        raise UnsupportedAvatarType(
            f"Unsupported avatar type: {content_type!r}. Use PNG or JPEG."
        )
    if not data:
        raise UnsupportedAvatarType("Avatar upload is empty")
    encoded = base64.b64encode(data).decode()
    return f"data:{mime};base64,{encoded}"


def store_avatar(ledger: Ledger, consultant_id: str, data: bytes, content_type: Optional[str]) -> str:
    """
    Validate, encode and attach an avatar. Returns the stored reference.
    Nothing is changed if the consultant is unknown or the type is rejected.
    """
    find_consultant(ledger, consultant_id)
    try:
        reference = encode_avatar(data, content_type)
    except UnsupportedAvatarType:
        _logger.warning(f"Avatar rejected for {consultant_id}: type={content_type!r}")
        raise
    set_avatar(ledger, consultant_id, reference)
    _logger.info(f"Avatar stored for {consultant_id} ({len(data)} bytes, {content_type})")
    return reference


def initials(name: str) -> str:
    """Fallback avatar text: first letters of the first two words."""
    return "".join(word[0] for word in (name or "").split(" ") if word)[:2]

"""
Avatar Service Tests
====================
Type checking and encoding happen in the collaborator; the ledger only stores
the opaque reference.
"""
import base64

import pytest

from services.avatar_service import (
    UnsupportedAvatarType,
    encode_avatar,
    initials,
    store_avatar,
)
from services.ledger_service import UnknownConsultant, set_avatar

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image-body"


class TestEncodeAvatar:

    def test_png_becomes_data_url(self):
        ref = encode_avatar(PNG_BYTES, "image/png")
        assert ref.startswith("data:image/png;base64,")
        assert base64.b64decode(ref.split(",", 1)[1]) == PNG_BYTES

    @pytest.mark.parametrize("mime", ["image/jpeg", "image/jpg", "IMAGE/JPEG"])
    def test_jpeg_variants_accepted(self, mime):
        assert encode_avatar(b"jpeg-bytes", mime).startswith(f"data:{mime.lower()};base64,")

    @pytest.mark.parametrize("mime", ["image/gif", "application/pdf", "", None])
    def test_other_types_rejected(self, mime):
        with pytest.raises(UnsupportedAvatarType):
            encode_avatar(b"data", mime)

    def test_empty_upload_rejected(self):
        with pytest.raises(UnsupportedAvatarType):
            encode_avatar(b"", "image/png")


class TestStoreAvatar:

    def test_stores_reference_on_consultant(self, ledger):
        c = ledger.consultants[1]
        ref = store_avatar(ledger, c.id, PNG_BYTES, "image/png")
        assert c.avatar == ref

    def test_rejected_type_leaves_avatar(self, ledger):
        c = ledger.consultants[0]
        store_avatar(ledger, c.id, PNG_BYTES, "image/png")
        before = c.avatar
        with pytest.raises(UnsupportedAvatarType):
            store_avatar(ledger, c.id, b"GIF89a", "image/gif")
        assert c.avatar == before

    def test_unknown_consultant(self, ledger):
        with pytest.raises(UnknownConsultant):
            store_avatar(ledger, "consultant-77", PNG_BYTES, "image/png")

    def test_ledger_does_not_interpret_reference(self, ledger):
        c = ledger.consultants[0]
        set_avatar(ledger, c.id, "anything-goes")
        assert c.avatar == "anything-goes"


class TestInitials:

    @pytest.mark.parametrize("name,expected", [
        ("Petr Michal", "PM"),
        ("Michael Arnošt Beneš", "MA"),
        ("No Name", "NN"),
        ("Cher", "C"),
        ("  Double  Space ", "DS"),
        ("", ""),
    ])
    def test_initials(self, name, expected):
        assert initials(name) == expected

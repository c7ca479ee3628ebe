"""Commercial, ownership and encryption frames (COMR, OWNE, ENCR)."""

from dataclasses import dataclass
from typing import Optional

from ..constants import DATE_SIZE, ENCRYPTION_ATTACHMENT_NAME, RECEIVED_AS, UNDEFINED_EXTENSION
from .base import AttachmentRequest, Frame, FrameBody, Text


def extension_for_mime(mime: Text) -> str:
    """Return '.subtype' for a MIME type, or '.undefined' without a '/'."""
    if isinstance(mime, bytes):
        mime = mime.decode("latin-1")
    _, slash, subtype = mime.partition("/")
    if not slash:
        return UNDEFINED_EXTENSION
    return "." + subtype


@dataclass(frozen=True)
class CommercialFrame(Frame):
    """COMR: offer details plus an optional seller logo.

    The logo is not kept on the frame itself; it is exposed as an
    AttachmentRequest named after the caller-supplied base name.
    """

    encoding: int
    price: Text
    valid_until: Text
    contact: Text
    received_as: int
    seller: Text
    description: Text
    mime_type: Text
    logo: AttachmentRequest

    title = "Commercial Frame"

    @property
    def received_as_description(self) -> str:
        return RECEIVED_AS.get(self.received_as, "unknown")

    @property
    def attachment(self) -> Optional[AttachmentRequest]:
        return self.logo

    @staticmethod
    def from_body(body: FrameBody) -> "CommercialFrame":
        encoding = body.encoding()
        price = body.terminated_text(encoding)
        valid_until = body.terminated_text(encoding)
        contact = body.terminated_text(encoding)
        received_as = body.byte()
        seller = body.terminated_text(encoding)
        description = body.terminated_text(encoding)
        mime_type = body.terminated_text(encoding)
        logo = AttachmentRequest(body.attachment_name, extension_for_mime(mime_type), body.rest())
        return CommercialFrame(
            body.header,
            encoding,
            price,
            valid_until,
            contact,
            received_as,
            seller,
            description,
            mime_type,
            logo,
        )


@dataclass(frozen=True)
class OwnershipFrame(Frame):
    """OWNE: price paid, purchase date (YYYYMMDD) and seller."""

    encoding: int
    price_paid: Text
    date: str
    seller: Text

    title = "Ownership Frame"

    @staticmethod
    def from_body(body: FrameBody) -> "OwnershipFrame":
        encoding = body.encoding()
        price_paid = body.terminated_text(encoding)
        date = body.read(DATE_SIZE).decode("latin-1")
        seller = body.rest_text(encoding)
        return OwnershipFrame(body.header, encoding, price_paid, date, seller)


@dataclass(frozen=True)
class EncryptionMethodFrame(Frame):
    """ENCR: registers an encryption method; the data goes to a sink."""

    owner: str
    method: int
    encryption_data: AttachmentRequest

    title = "Encryption Method Registration Frame"

    @property
    def attachment(self) -> Optional[AttachmentRequest]:
        return self.encryption_data

    @staticmethod
    def from_body(body: FrameBody) -> "EncryptionMethodFrame":
        owner = body.latin1()
        method = body.byte()
        data = AttachmentRequest(ENCRYPTION_ATTACHMENT_NAME, "", body.rest())
        return EncryptionMethodFrame(body.header, owner, method, data)

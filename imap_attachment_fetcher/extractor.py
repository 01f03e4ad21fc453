"""
Identification and decoding of attachment parts.
"""
from dataclasses import dataclass
from typing import Optional
import base64
import re
import logging
import quopri

from imapclient import IMAPClient

from .structure import Encoding, MimePart

_NON_BASE64 = re.compile(rb"[^A-Za-z0-9+/]")


@dataclass
class AttachmentCandidate:
    """
    A part recognised as an attachment, with its decoded body.
    """
    is_attachment: bool = False
    filename: str = ''
    name: str = ''
    data: bytes = b''


def decode_body(data: bytes, encoding: Encoding) -> bytes:
    """
    Reverse the transfer-encoding of a part body.

    Args:
        data: Raw body as fetched from the server
        encoding: The part's transfer-encoding

    Returns:
        bytes: Decoded body; bodies in any other encoding are returned unchanged
    """
    if encoding is Encoding.BASE64:
        # Line breaks are dropped, a dangling final character is ignored
        # and missing trailing padding restored
        cleaned = _NON_BASE64.sub(b'', data)
        if len(cleaned) % 4 == 1:
            cleaned = cleaned[:-1]
        return base64.b64decode(cleaned + b'=' * (-len(cleaned) % 4))
    if encoding is Encoding.QUOTED_PRINTABLE:
        return quopri.decodestring(data)
    return data


class AttachmentExtractor:
    """
    Decides whether a part is an attachment and fetches its content.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def collect(self, part: MimePart, client: IMAPClient, message_id: int,
                position: int) -> Optional[AttachmentCandidate]:
        """
        Build an attachment candidate for one child part of a message.

        A part is an attachment when its Content-Disposition carries a
        ``filename`` parameter or its Content-Type carries a ``name``
        parameter. Both are recorded when present.

        Args:
            part: The part to inspect
            client: Open mailbox session
            message_id: Message the part belongs to
            position: 1-based position of the part among its siblings

        Returns:
            AttachmentCandidate: The decoded attachment, or None if the part is not one
        """
        candidate = AttachmentCandidate()

        for attribute, value in part.disposition_parameters:
            if attribute.lower() == 'filename':
                candidate.is_attachment = True
                candidate.filename = value

        for attribute, value in part.parameters:
            if attribute.lower() == 'name':
                candidate.is_attachment = True
                candidate.name = value

        if not candidate.is_attachment:
            self.logger.debug(f"Message {message_id} part {position} ({part.content_type}) is not an attachment")
            return None

        self.logger.debug(f"Found attachment in message {message_id} part {position} - "
                          f"Filename: '{candidate.filename}', Name: '{candidate.name}', "
                          f"Encoding: {part.encoding.value}")

        raw = self.fetch_body(client, message_id, position)
        candidate.data = decode_body(raw, part.encoding)
        self.logger.debug(f"Attachment data size: {len(candidate.data)} bytes")
        return candidate

    def fetch_body(self, client: IMAPClient, message_id: int, position: int) -> bytes:
        """
        Fetch the raw body of one part without setting the \\Seen flag.
        """
        section = str(position)
        response = client.fetch([message_id], [f'BODY.PEEK[{section}]'])
        message_data = response.get(message_id, {})
        body = message_data.get(f'BODY[{section}]'.encode('ascii'))
        return body or b''

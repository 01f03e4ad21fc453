"""
Fetch email attachments from an IMAP mailbox and save them to disk.
"""

from .account import Account
from .connection import ReadOnlyMailboxConnection
from .criteria import SearchCriteria
from .exceptions import (
    AttachmentFetchError,
    AttachmentSaveError,
    DirectoryUnavailableError,
    FileOpenError,
    FileWriteError,
    MailboxConnectionError,
)
from .extractor import AttachmentCandidate, AttachmentExtractor, decode_body
from .fetcher import AttachmentFetcher
from .structure import Encoding, MimePart, parse_parts
from .writer import AttachmentWriter

__version__ = "0.1.0"
__all__ = [
    "Account",
    "AttachmentCandidate",
    "AttachmentExtractor",
    "AttachmentFetchError",
    "AttachmentFetcher",
    "AttachmentSaveError",
    "AttachmentWriter",
    "DirectoryUnavailableError",
    "Encoding",
    "FileOpenError",
    "FileWriteError",
    "MailboxConnectionError",
    "MimePart",
    "ReadOnlyMailboxConnection",
    "SearchCriteria",
    "decode_body",
    "parse_parts",
]

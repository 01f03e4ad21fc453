"""
Exceptions raised while fetching and saving email attachments.
"""


class AttachmentFetchError(RuntimeError):
    """
    Base class for all errors raised by this package.
    """


class MailboxConnectionError(AttachmentFetchError):
    """
    The mailbox could not be opened for reading.
    """


class AttachmentSaveError(AttachmentFetchError):
    """
    Base class for filesystem errors, carries the offending path.
    """

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class DirectoryUnavailableError(AttachmentSaveError):
    """
    The save directory does not exist and could not be created.
    """


class FileOpenError(AttachmentSaveError):
    """
    The target file could not be opened for writing.
    """


class FileWriteError(AttachmentSaveError):
    """
    The attachment bytes could not be written completely.
    """

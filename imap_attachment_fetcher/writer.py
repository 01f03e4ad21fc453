"""
Persisting decoded attachments to disk.
"""
from typing import Optional
import logging
import os
import uuid

from .exceptions import DirectoryUnavailableError, FileOpenError, FileWriteError

ATTACHMENT_SUFFIX = '.attachment'
DIRECTORY_MODE = 0o770


class AttachmentWriter:
    """
    Writes attachment bytes into a directory under generated unique names.
    """

    def __init__(self, directory: str, logger: Optional[logging.Logger] = None):
        """
        Initialize the writer.

        Args:
            directory: Directory attachments are saved to, created on first write
            logger: Optional logger instance
        """
        self.directory = directory
        self.logger = logger or logging.getLogger(__name__)

    def write(self, data: bytes) -> str:
        """
        Save attachment bytes to a new file.

        Args:
            data: Decoded attachment content

        Returns:
            str: Full path of the created file

        Raises:
            DirectoryUnavailableError: The directory is missing and cannot be created
            FileOpenError: The file cannot be created
            FileWriteError: The content could not be written; the file is removed
        """
        self.ensure_directory()
        file_path = self.build_path(self.generate_filename())

        try:
            handle = open(file_path, 'xb')
        except OSError as e:
            self.logger.error(f"Could not open {file_path} for writing: {e}")
            raise FileOpenError(f"Could not save an email attachment as {file_path}", file_path) from e

        try:
            try:
                written = handle.write(data)
                if written is not None and written < len(data):
                    raise OSError(f"only {written} of {len(data)} bytes written")
            finally:
                # Buffered data is flushed here, so close can fail too
                handle.close()
        except OSError as e:
            self.logger.error(f"Error writing attachment into {file_path}: {e}")
            try:
                os.remove(file_path)
            except OSError as remove_error:
                self.logger.error(f"Error removing partial attachment {file_path}: {remove_error}")
            raise FileWriteError(f"Could not write an email attachment into {file_path}", file_path) from e

        self.logger.info(f"Saved attachment to {file_path}")
        return file_path

    def ensure_directory(self):
        """
        Create the save directory, with parents, if it does not exist yet.
        """
        if os.path.exists(self.directory):
            if os.path.isdir(self.directory):
                return
            raise DirectoryUnavailableError(
                f"Could not create dir to save email attachments: {self.directory}", self.directory)

        try:
            self.make_directories(self.directory)
            self.logger.info(f"Created attachment directory {self.directory}")
        except OSError as e:
            # Another process may have created it in the meantime
            if not os.path.isdir(self.directory):
                self.logger.error(f"Error creating attachment directory {self.directory}: {e}")
                raise DirectoryUnavailableError(
                    f"Could not create dir to save email attachments: {self.directory}",
                    self.directory) from e

    @staticmethod
    def make_directories(directory: str):
        """
        Create a directory and its missing parents, each with DIRECTORY_MODE.
        """
        missing = []
        path = os.path.abspath(directory)
        while not os.path.exists(path):
            missing.append(path)
            parent = os.path.dirname(path)
            if parent == path:
                break
            path = parent

        for path in reversed(missing):
            try:
                os.mkdir(path, DIRECTORY_MODE)
            except FileExistsError:
                if not os.path.isdir(path):
                    raise

    def build_path(self, filename: str) -> str:
        directory = self.directory.rstrip('\\/')
        return f"{directory}{os.sep}{filename}"

    @staticmethod
    def generate_filename() -> str:
        return f"imap{uuid.uuid4().hex}{ATTACHMENT_SUFFIX}"

"""
Read-only IMAP session the attachments are fetched from.
"""
from contextlib import contextmanager
from typing import Iterator, Optional
import logging

from imapclient import IMAPClient

from .account import Account
from .exceptions import MailboxConnectionError


class ReadOnlyMailboxConnection:
    """
    Opens a mailbox folder read-only and hands out the session.
    """

    def __init__(self, account: Account, logger: Optional[logging.Logger] = None):
        """
        Initialize the connection with an account.

        Args:
            account: The email account configuration
            logger: Optional logger instance
        """
        self.account = account
        self.client = None
        self.logger = logger or logging.getLogger(__name__)

    def get_handle(self) -> IMAPClient:
        """
        Connect, log in and select the account folder read-only.

        Returns the already open session when called again before release.

        Returns:
            IMAPClient: The open session

        Raises:
            MailboxConnectionError: If the server cannot be reached or the folder selected
        """
        if self.client is not None:
            return self.client

        client = None
        try:
            self.logger.info(f"Connecting to {self.account.server} for account {self.account.name}")
            client = IMAPClient(
                self.account.server,
                port=self.account.port,
                use_uid=True,
                ssl=self.account.use_ssl
            )
            client.login(self.account.username, self.account.password)
            client.select_folder(self.account.folder, readonly=True)
        except Exception as e:
            self.logger.error(f"Failed to open {self.account.folder} on {self.account.server}: {e}")
            if client is not None:
                self._logout(client)
            raise MailboxConnectionError(
                f"Could not open {self.account.folder} on {self.account.server}") from e

        self.logger.info(f"Opened {self.account.folder} on {self.account.server} read-only")
        self.client = client
        return client

    def release_handle(self):
        """
        Log out and drop the session. Does nothing if no session is open.
        """
        if self.client is not None:
            try:
                self._logout(self.client)
            finally:
                self.client = None

    @contextmanager
    def handle(self) -> Iterator[IMAPClient]:
        """
        Scoped access to the session, released on every exit path.
        """
        client = self.get_handle()
        try:
            yield client
        finally:
            self.release_handle()

    def _logout(self, client: IMAPClient):
        try:
            client.logout()
            self.logger.info(f"Disconnected from {self.account.server}")
        except Exception as e:
            self.logger.error(f"Error disconnecting from {self.account.server}: {e}")

    def __enter__(self) -> IMAPClient:
        return self.get_handle()

    def __exit__(self, exc_type, exc_value, traceback):
        self.release_handle()

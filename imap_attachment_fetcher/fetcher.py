"""
Fetch attachments of matching messages and save them to disk.
"""
from typing import List, Optional
import logging

from .connection import ReadOnlyMailboxConnection
from .criteria import SearchCriteria
from .extractor import AttachmentExtractor
from .structure import parse_parts
from .writer import AttachmentWriter


class AttachmentFetcher:
    """
    Searches a mailbox and saves every attachment of the matched messages.
    """

    def __init__(self, connection: ReadOnlyMailboxConnection, directory: str,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the fetcher.

        Args:
            connection: Provider of the read-only mailbox session
            directory: Directory attachments are saved to
            logger: Optional logger instance
        """
        self.connection = connection
        self.logger = logger or logging.getLogger(__name__)
        self.extractor = AttachmentExtractor(self.logger)
        self.writer = AttachmentWriter(directory, self.logger)

    def fetch_attachments(self, criteria: SearchCriteria) -> List[str]:
        """
        Save the attachments of all messages matching the criteria.

        The session is released once the call returns or raises.

        Args:
            criteria: Search query and charset

        Returns:
            List[str]: Paths of the saved files, in message then part order
        """
        attachment_files = []

        with self.connection.handle() as client:
            self.logger.info(f"Searching for messages with criteria: {criteria.as_query_string()}")
            message_ids = client.search(criteria.as_query_string(), criteria.charset_for_search())

            if not message_ids:
                self.logger.info("No messages found")
                return attachment_files

            self.logger.info(f"Found {len(message_ids)} messages")

            for message_id in message_ids:
                response = client.fetch([message_id], ['BODYSTRUCTURE'])
                structure = response.get(message_id, {}).get(b'BODYSTRUCTURE')

                attachments = []
                for position, part in enumerate(parse_parts(structure), 1):
                    attachment = self.extractor.collect(part, client, message_id, position)
                    if attachment:
                        attachments.append(attachment)

                for attachment in attachments:
                    if attachment.is_attachment:
                        attachment_files.append(self.writer.write(attachment.data))

        self.logger.info(f"Saved {len(attachment_files)} attachments")
        return attachment_files

"""
Example showing how to extend the Account class with a save directory
and load it from a JSON configuration file
"""
from dataclasses import dataclass
import json
import logging
import sys
from typing import Optional

from imap_attachment_fetcher import (
    Account, AttachmentFetcher, AttachmentFetchError, ReadOnlyMailboxConnection, SearchCriteria
)


@dataclass
class ArchivingAccount(Account):
    """
    Account that also knows where its attachments go and what to search for.
    """
    target_folder: Optional[str] = None
    search: str = 'ALL'
    search_charset: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> 'ArchivingAccount':
        """
        Create an ArchivingAccount instance from a dictionary.

        Args:
            data: Dictionary containing account configuration

        Returns:
            ArchivingAccount: New ArchivingAccount instance
        """
        return cls(
            # Base Account fields
            name=data.get('name', ''),
            server=data.get('server', ''),
            username=data.get('username', ''),
            password=data.get('password', ''),
            port=data.get('port', 993),
            use_ssl=data.get('use_ssl', True),
            folder=data.get('folder', 'INBOX'),
            # Application-specific fields
            target_folder=data.get('target_folder'),
            search=data.get('search', 'ALL'),
            search_charset=data.get('search_charset')
        )


def main():
    """
    Save attachments for every account listed in a JSON file, e.g.

        [{"name": "Work Email", "server": "imap.company.com",
          "username": "user@company.com", "password": "secure_password",
          "folder": "Invoices", "target_folder": "/srv/invoices",
          "search": "SINCE 01-Jan-2024", "search_charset": "UTF-8"}]
    """
    logging.basicConfig(level=logging.INFO,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    config_path = sys.argv[1] if len(sys.argv) > 1 else 'accounts.json'
    with open(config_path, 'r', encoding='utf-8') as f:
        accounts = [ArchivingAccount.from_dict(data) for data in json.load(f)]

    for account in accounts:
        if not account.target_folder:
            print(f"{account.name}: no target_folder configured, skipping")
            continue

        fetcher = AttachmentFetcher(ReadOnlyMailboxConnection(account), account.target_folder)
        try:
            paths = fetcher.fetch_attachments(SearchCriteria(account.search, account.search_charset))
        except AttachmentFetchError as e:
            print(f"{account.name}: {e}")
            continue

        print(f"{account.name}: saved {len(paths)} attachments to {account.target_folder}")


if __name__ == "__main__":
    main()

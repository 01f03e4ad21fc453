"""
Basic usage example: save the attachments of unread messages
"""
import logging
from imap_attachment_fetcher import (
    Account, AttachmentFetcher, AttachmentFetchError, ReadOnlyMailboxConnection, SearchCriteria
)

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

def main():
    # Create an account configuration
    account = Account(
        name="My Email Account",
        server="imap.example.com",  # Replace with your IMAP server
        username="your.email@example.com",  # Replace with your email
        password="your_password",  # Replace with your password
        port=993,
        use_ssl=True
    )

    connection = ReadOnlyMailboxConnection(account)
    fetcher = AttachmentFetcher(connection, "downloaded_attachments")

    try:
        paths = fetcher.fetch_attachments(SearchCriteria('UNSEEN'))
    except AttachmentFetchError as e:
        print(f"Fetching attachments failed: {e}")
        return

    if not paths:
        print("No attachments found")
        return

    print(f"Saved {len(paths)} attachments:")
    for path in paths:
        print(f"  {path}")


if __name__ == "__main__":
    main()

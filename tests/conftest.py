"""
Shared fixtures: an in-memory IMAP server standing in for IMAPClient.
"""
import pytest
from imapclient.response_types import BodyData

from imap_attachment_fetcher import Account
from imap_attachment_fetcher import connection as connection_module


def text_part(charset=b'UTF-8', encoding=b'7BIT'):
    return (b'TEXT', b'PLAIN', (b'CHARSET', charset), None, None, encoding, 12, 1, None, None, None)


def binary_part(main_type=b'APPLICATION', sub_type=b'OCTET-STREAM', params=None,
                encoding=b'BASE64', disposition=None):
    return (main_type, sub_type, params, None, None, encoding, 100, None, disposition, None)


def multipart(*parts, sub_type=b'MIXED'):
    return parts + (sub_type, (b'BOUNDARY', b'----=_Part_0'), None, None)


class FakeIMAPClient:
    """
    Minimal IMAPClient replacement serving canned messages.
    """

    def __init__(self, host, port=None, use_uid=True, ssl=True, server=None):
        self.host = host
        self.port = port
        self.use_uid = use_uid
        self.ssl = ssl
        self.server = server
        self.logged_in = None
        self.selected = None
        self.logout_calls = 0
        self.searches = []
        self.fetches = []

    def login(self, username, password):
        if self.server.fail_login:
            raise Exception("[AUTHENTICATIONFAILED] Invalid credentials")
        self.logged_in = (username, password)

    def select_folder(self, folder, readonly=False):
        self.selected = (folder, readonly)
        return {b'EXISTS': len(self.server.messages)}

    def search(self, criteria='ALL', charset=None):
        self.searches.append((criteria, charset))
        return sorted(self.server.messages)

    def fetch(self, messages, data):
        self.fetches.append((list(messages), list(data)))
        response = {}
        for message_id in messages:
            structure, bodies = self.server.messages[message_id]
            item = {}
            for name in data:
                if name == 'BODYSTRUCTURE':
                    item[b'BODYSTRUCTURE'] = BodyData.create(structure)
                elif name.startswith('BODY.PEEK['):
                    section = name[len('BODY.PEEK['):-1]
                    item[f'BODY[{section}]'.encode('ascii')] = bodies.get(section)
            response[message_id] = item
        return response

    def logout(self):
        self.logout_calls += 1
        return b'Logging out'


class FakeServer:
    """
    Holds the mailbox contents and every client created against it.
    """

    def __init__(self):
        self.messages = {}
        self.clients = []
        self.fail_login = False

    def add_message(self, message_id, structure, bodies=None):
        self.messages[message_id] = (structure, bodies or {})

    def connect(self, host, port=None, use_uid=True, ssl=True):
        client = FakeIMAPClient(host, port=port, use_uid=use_uid, ssl=ssl, server=self)
        self.clients.append(client)
        return client

    @property
    def client(self):
        return self.clients[-1]


@pytest.fixture
def fake_server(monkeypatch):
    server = FakeServer()
    monkeypatch.setattr(connection_module, 'IMAPClient', server.connect)
    return server


@pytest.fixture
def account():
    return Account(
        name="Test Account",
        server="imap.example.com",
        username="user@example.com",
        password="secret",
        folder="Invoices"
    )

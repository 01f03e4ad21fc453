import pytest

from imap_attachment_fetcher.connection import ReadOnlyMailboxConnection
from imap_attachment_fetcher.exceptions import MailboxConnectionError


def test_get_handle_opens_folder_read_only(fake_server, account):
    connection = ReadOnlyMailboxConnection(account)

    client = connection.get_handle()

    assert client.host == 'imap.example.com'
    assert client.port == 993
    assert client.ssl is True
    assert client.logged_in == ('user@example.com', 'secret')
    assert client.selected == ('Invoices', True)


def test_get_handle_reuses_open_session(fake_server, account):
    connection = ReadOnlyMailboxConnection(account)

    assert connection.get_handle() is connection.get_handle()
    assert len(fake_server.clients) == 1


def test_release_handle_logs_out_once(fake_server, account):
    connection = ReadOnlyMailboxConnection(account)
    client = connection.get_handle()

    connection.release_handle()
    connection.release_handle()

    assert client.logout_calls == 1
    assert connection.client is None


def test_scoped_handle_released_on_error(fake_server, account):
    connection = ReadOnlyMailboxConnection(account)

    with pytest.raises(ValueError):
        with connection.handle() as client:
            raise ValueError("boom")

    assert client.logout_calls == 1
    assert connection.client is None


def test_context_manager(fake_server, account):
    with ReadOnlyMailboxConnection(account) as client:
        assert client.selected == ('Invoices', True)

    assert client.logout_calls == 1


def test_login_failure_raises_and_logs_out(fake_server, account):
    fake_server.fail_login = True
    connection = ReadOnlyMailboxConnection(account)

    with pytest.raises(MailboxConnectionError):
        connection.get_handle()

    assert fake_server.client.logout_calls == 1
    assert connection.client is None

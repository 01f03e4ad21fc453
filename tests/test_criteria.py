from imap_attachment_fetcher import Account, SearchCriteria


def test_criteria_defaults():
    criteria = SearchCriteria()

    assert criteria.as_query_string() == 'ALL'
    assert criteria.charset_for_search() is None


def test_criteria_from_terms():
    criteria = SearchCriteria.from_terms('UNSEEN', ' SUBJECT "faktura" ', '', charset='UTF-8')

    assert criteria.as_query_string() == 'UNSEEN SUBJECT "faktura"'
    assert criteria.charset_for_search() == 'UTF-8'


def test_criteria_from_no_terms_matches_all():
    assert SearchCriteria.from_terms().as_query_string() == 'ALL'


def test_account_from_dict_defaults():
    account = Account.from_dict({
        'name': 'Work',
        'server': 'imap.company.com',
        'username': 'user@company.com',
        'password': 'pw',
    })

    assert account.port == 993
    assert account.use_ssl is True
    assert account.folder == 'INBOX'


def test_account_from_dict_overrides():
    account = Account.from_dict({'server': 'localhost', 'port': 143, 'use_ssl': False, 'folder': 'Archive'})

    assert (account.port, account.use_ssl, account.folder) == (143, False, 'Archive')

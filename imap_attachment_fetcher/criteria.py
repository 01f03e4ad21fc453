"""
Search criteria handed to the mailbox search.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SearchCriteria:
    """
    A pre-built IMAP search query and the charset to run it with.
    """
    query: str = 'ALL'
    charset: Optional[str] = None

    @classmethod
    def from_terms(cls, *terms: str, charset: Optional[str] = None) -> 'SearchCriteria':
        """
        Build criteria from individual search keys, e.g.
        ``from_terms('UNSEEN', 'SUBJECT "invoice"')``.
        """
        query = ' '.join(term.strip() for term in terms if term and term.strip())
        return cls(query=query or 'ALL', charset=charset)

    def as_query_string(self) -> str:
        return self.query

    def charset_for_search(self) -> Optional[str]:
        return self.charset

"""
MIME part model built from an IMAP BODYSTRUCTURE response.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

Parameters = List[Tuple[str, str]]


class Encoding(Enum):
    """
    Content-Transfer-Encoding of a MIME part.
    """
    NONE = 'none'
    BASE64 = 'base64'
    QUOTED_PRINTABLE = 'quoted-printable'
    OTHER = 'other'

    @classmethod
    def from_header(cls, value: Optional[Union[str, bytes]]) -> 'Encoding':
        """
        Map a transfer-encoding token to an Encoding.

        Args:
            value: Token as sent by the server, e.g. b'BASE64' (None when absent)

        Returns:
            Encoding: NONE for identity encodings, OTHER for anything unknown
        """
        token = _to_str(value).strip().lower()
        if token in ('', '7bit', '8bit', 'binary'):
            return cls.NONE
        if token == 'base64':
            return cls.BASE64
        if token == 'quoted-printable':
            return cls.QUOTED_PRINTABLE
        return cls.OTHER


@dataclass
class MimePart:
    """
    One node of a message's part tree.
    """
    content_type: str = 'text/plain'
    encoding: Encoding = Encoding.NONE
    parameters: Parameters = field(default_factory=list)
    disposition_parameters: Parameters = field(default_factory=list)


def _to_str(value) -> str:
    if value is None:
        return ''
    if isinstance(value, bytes):
        return value.decode('utf-8', errors='replace')
    return str(value)


def _pairs(values: Optional[Sequence]) -> Parameters:
    # Parameter lists arrive flattened: (name1, value1, name2, value2, ...)
    if not values or not isinstance(values, (list, tuple)):
        return []
    items = list(values)
    return [(_to_str(items[i]), _to_str(items[i + 1])) for i in range(0, len(items) - 1, 2)]


def _is_multipart(node: Sequence) -> bool:
    return len(node) > 0 and isinstance(node[0], list)


def _disposition_index(node: Sequence) -> int:
    # Extension data follows the basic fields, whose count depends on the type
    if _is_multipart(node):
        return 3
    main_type = _to_str(node[0]).lower()
    sub_type = _to_str(node[1]).lower()
    if main_type == 'text':
        return 9
    if main_type == 'message' and sub_type == 'rfc822':
        return 11
    return 8


def _disposition_parameters(node: Sequence) -> Parameters:
    index = _disposition_index(node)
    if len(node) <= index:
        return []
    disposition = node[index]
    if not isinstance(disposition, (list, tuple)) or len(disposition) < 2:
        return []
    return _pairs(disposition[1])


def parse_part(node: Sequence) -> MimePart:
    """
    Convert a single BODYSTRUCTURE node into a MimePart.

    Args:
        node: A part as returned by IMAPClient (BodyData)

    Returns:
        MimePart: The part's encoding and parameters
    """
    if _is_multipart(node):
        sub_type = _to_str(node[1]).lower() if len(node) > 1 else 'mixed'
        return MimePart(
            content_type=f"multipart/{sub_type}",
            encoding=Encoding.NONE,
            parameters=_pairs(node[2]) if len(node) > 2 else [],
            disposition_parameters=_disposition_parameters(node)
        )

    return MimePart(
        content_type=f"{_to_str(node[0]).lower()}/{_to_str(node[1]).lower()}",
        encoding=Encoding.from_header(node[5] if len(node) > 5 else None),
        parameters=_pairs(node[2] if len(node) > 2 else None),
        disposition_parameters=_disposition_parameters(node)
    )


def parse_parts(bodystructure: Optional[Sequence]) -> List[MimePart]:
    """
    List the direct children of a message's top-level structure.

    Nested multiparts are returned as a single part and not descended into.
    A message that is not multipart has no children.

    Args:
        bodystructure: The BODYSTRUCTURE value fetched for one message

    Returns:
        List[MimePart]: Child parts in part-tree order
    """
    if not bodystructure or not _is_multipart(bodystructure):
        return []
    return [parse_part(child) for child in bodystructure[0]]

"""
Rootline Core - Access Rootline Element
=======================================

An element of the "Access Rootline". Represents the frontend user group
access restrictions for a page, a page's content, or a generic record.

Token format:
    c:<g1,g2,...>        Content element
    <g1,g2,...>          Content element, shorthand without selector
    r:<g1,g2,...>        Record element
    <pageId>:<g1,g2,...> Page element

Group ids are coerced leniently, see coercion.int_explode().

Author: Rootline Core Development Team
Version: 1.0.0
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple

from .coercion import int_explode
from .constants import (
    CONTENT_SELECTOR,
    ELEMENT_TYPE_CONTENT,
    ELEMENT_TYPE_PAGE,
    ELEMENT_TYPE_RECORD,
    ERROR_CODE_PAGE_FORMAT,
    ERROR_CODE_RECORD_FORMAT,
    ERROR_MESSAGE_PAGE_FORMAT,
    ERROR_MESSAGE_RECORD_FORMAT,
    GROUP_DELIMITER,
    PAGE_ID_GROUP_DELIMITER,
    RECORD_SELECTOR,
)
from .exceptions import RootlineElementFormatError

_PAGE_ID = re.compile(r"\d+", re.ASCII)


class ElementKind(Enum):
    """Kind of access rootline element."""

    PAGE = "PAGE"
    CONTENT = "CONTENT"
    RECORD = "RECORD"

    @property
    def type_code(self) -> int:
        """Get legacy integer type flag."""
        return _TYPE_CODES[self]

    @property
    def selector(self) -> Optional[str]:
        """Get token selector (None for pages, whose selector is the page id)."""
        return _SELECTORS[self]

    @classmethod
    def from_type_code(cls, code: int) -> "ElementKind":
        """Resolve a legacy integer type flag."""
        for kind, kind_code in _TYPE_CODES.items():
            if kind_code == code:
                return kind
        raise ValueError(f"Unknown element type code: {code}")


_TYPE_CODES: Dict[ElementKind, int] = {
    ElementKind.PAGE: ELEMENT_TYPE_PAGE,
    ElementKind.CONTENT: ELEMENT_TYPE_CONTENT,
    ElementKind.RECORD: ELEMENT_TYPE_RECORD,
}

_SELECTORS: Dict[ElementKind, Optional[str]] = {
    ElementKind.PAGE: None,
    ElementKind.CONTENT: CONTENT_SELECTOR,
    ElementKind.RECORD: RECORD_SELECTOR,
}


def split_token(token: str) -> Tuple[ElementKind, Optional[int], str]:
    """
    Split a rootline element token into its parts.

    Args:
        token: String representation of an access rootline element,
            usually of the form pageId:commaSeparatedAccessGroups

    Returns:
        Tuple of (kind, page_id, raw groups string)

    Raises:
        RootlineElementFormatError: Malformed record or page element
    """
    if not isinstance(token, str):
        raise TypeError(
            f"Rootline element token must be str, got {type(token).__name__}"
        )

    parts = token.split(PAGE_ID_GROUP_DELIMITER)

    if len(parts) == 1 or parts[0] == CONTENT_SELECTOR:
        # Segments after "c:<groups>" are ignored
        groups = parts[0] if len(parts) == 1 else parts[1]
        return ElementKind.CONTENT, None, groups

    if parts[0] == RECORD_SELECTOR:
        if len(parts) != 2:
            raise RootlineElementFormatError(
                ERROR_MESSAGE_RECORD_FORMAT,
                code=ERROR_CODE_RECORD_FORMAT,
                element_kind=ElementKind.RECORD,
                token=token,
            )
        return ElementKind.RECORD, None, parts[1]

    if len(parts) != 2 or not _PAGE_ID.fullmatch(parts[0]):
        raise RootlineElementFormatError(
            ERROR_MESSAGE_PAGE_FORMAT,
            code=ERROR_CODE_PAGE_FORMAT,
            element_kind=ElementKind.PAGE,
            token=token,
        )
    return ElementKind.PAGE, int(parts[0]), parts[1]


@dataclass(frozen=True)
class RootlineElement:
    """
    Immutable access rootline element.

    Example:
        element = RootlineElement.parse("12:1,2,3")

        element.kind        # ElementKind.PAGE
        element.page_id     # 12
        element.groups      # (1, 2, 3)
        str(element)        # "12:1,2,3"
    """

    kind: ElementKind
    page_id: Optional[int] = None
    groups: Tuple[int, ...] = ()

    def __post_init__(self):
        if not isinstance(self.kind, ElementKind):
            raise ValueError(f"Invalid element kind: {self.kind!r}")

        if self.kind == ElementKind.PAGE:
            if not isinstance(self.page_id, int) or self.page_id < 0:
                raise ValueError(
                    f"Page element requires a non-negative page id, got {self.page_id!r}"
                )
        elif self.page_id is not None:
            raise ValueError(f"{self.kind.value} element cannot carry a page id")

        groups = tuple(self.groups)
        if not all(isinstance(group, int) for group in groups):
            raise ValueError(f"Group ids must be integers, got {groups!r}")
        object.__setattr__(self, "groups", groups)

    @classmethod
    def parse(cls, token: str) -> "RootlineElement":
        """
        Create an element from its string representation.

        Raises:
            RootlineElementFormatError: On wrong access format
        """
        kind, page_id, groups = split_token(token)
        return cls(
            kind=kind,
            page_id=page_id,
            groups=tuple(int_explode(GROUP_DELIMITER, groups)),
        )

    @classmethod
    def page(cls, page_id: int, groups: Iterable[int] = ()) -> "RootlineElement":
        """Create a page element."""
        return cls(kind=ElementKind.PAGE, page_id=page_id, groups=tuple(groups))

    @classmethod
    def content(cls, groups: Iterable[int] = ()) -> "RootlineElement":
        """Create a content element."""
        return cls(kind=ElementKind.CONTENT, groups=tuple(groups))

    @classmethod
    def record(cls, groups: Iterable[int] = ()) -> "RootlineElement":
        """Create a record element."""
        return cls(kind=ElementKind.RECORD, groups=tuple(groups))

    def to_string(self) -> str:
        """Get the canonical token for this element."""
        selector = self.kind.selector
        if selector is None:
            selector = str(self.page_id)

        return (
            selector
            + PAGE_ID_GROUP_DELIMITER
            + GROUP_DELIMITER.join(str(group) for group in self.groups)
        )

    def __str__(self) -> str:
        return self.to_string()

    def get_kind(self) -> ElementKind:
        return self.kind

    def get_type(self) -> int:
        """Get legacy integer type flag (1 page, 2 content, 3 record)."""
        return self.kind.type_code

    def get_page_id(self) -> Optional[int]:
        """Get the page id, None unless this is a page element."""
        return self.page_id

    def get_groups(self) -> Tuple[int, ...]:
        return self.groups

    def is_page(self) -> bool:
        return self.kind == ElementKind.PAGE

    def is_content(self) -> bool:
        return self.kind == ElementKind.CONTENT

    def is_record(self) -> bool:
        return self.kind == ElementKind.RECORD

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "kind": self.kind.value,
            "page_id": self.page_id,
            "groups": list(self.groups),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RootlineElement":
        """Create from dictionary."""
        return cls(
            kind=ElementKind(data["kind"]),
            page_id=data.get("page_id"),
            groups=tuple(data.get("groups", ())),
        )


# =============================================================================
# EXPORTS
# =============================================================================

__all__ = [
    "ElementKind",
    "RootlineElement",
    "split_token",
]

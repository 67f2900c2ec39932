# Rootline Core - Access Rootline Elements
"""
Access rootline element format for frontend user group restrictions.

Modules:
    constants: Token grammar, legacy type codes and error codes
    exceptions: Centralized exception hierarchy
    coercion: Lenient integer list coercion for group ids
    rootline_element: Immutable rootline element value object
    parser: Rootline element parser with logging and statistics
"""

from .constants import (
    VERSION,
    PAGE_ID_GROUP_DELIMITER,
    GROUP_DELIMITER,
    ELEMENT_TYPE_PAGE,
    ELEMENT_TYPE_CONTENT,
    ELEMENT_TYPE_RECORD,
    ERROR_CODE_RECORD_FORMAT,
    ERROR_CODE_PAGE_FORMAT,
)

from .exceptions import (
    RootlineError,
    RootlineElementFormatError,
    is_recoverable,
)

from .coercion import (
    to_int,
    int_explode,
    is_canonical_int,
)

from .rootline_element import (
    ElementKind,
    RootlineElement,
    split_token,
)

from .parser import (
    RootlineElementParserConfig,
    RootlineElementParser,
)

__version__ = "1.0.0"

__all__ = [
    # Version
    "__version__",

    # Constants
    "VERSION",
    "PAGE_ID_GROUP_DELIMITER",
    "GROUP_DELIMITER",
    "ELEMENT_TYPE_PAGE",
    "ELEMENT_TYPE_CONTENT",
    "ELEMENT_TYPE_RECORD",
    "ERROR_CODE_RECORD_FORMAT",
    "ERROR_CODE_PAGE_FORMAT",

    # Exceptions
    "RootlineError",
    "RootlineElementFormatError",
    "is_recoverable",

    # Coercion
    "to_int",
    "int_explode",
    "is_canonical_int",

    # Rootline Element
    "ElementKind",
    "RootlineElement",
    "split_token",

    # Parser
    "RootlineElementParserConfig",
    "RootlineElementParser",
]

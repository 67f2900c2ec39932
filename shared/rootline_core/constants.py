"""
Rootline Core - Token Format Constants
======================================

Centralized constants for the access rootline element format.
All delimiters, selectors and error codes should be defined here.

Author: Rootline Core Development Team
Version: 1.0.0
"""

# =============================================================================
# SYSTEM IDENTIFICATION
# =============================================================================

VERSION = "1.0.0"
LOGGER_PREFIX = "ROOTLINE"

# =============================================================================
# TOKEN GRAMMAR
# =============================================================================

# Delimiter between the selector (page id, "c" or "r") and the group list
PAGE_ID_GROUP_DELIMITER = ":"

# Delimiter between the group ids of an element
GROUP_DELIMITER = ","

# Selectors for the non-page element types
CONTENT_SELECTOR = "c"
RECORD_SELECTOR = "r"

# =============================================================================
# LEGACY ELEMENT TYPE CODES
# =============================================================================

# Integer type flags used by existing consumers of the rootline
ELEMENT_TYPE_PAGE = 1
ELEMENT_TYPE_CONTENT = 2
ELEMENT_TYPE_RECORD = 3

# =============================================================================
# ERROR CODES
# =============================================================================

ERROR_CODE_RECORD_FORMAT = 1308342937
ERROR_CODE_PAGE_FORMAT = 1294421105

ERROR_MESSAGE_RECORD_FORMAT = (
    "Wrong Access Rootline Element format for a record type element."
)
ERROR_MESSAGE_PAGE_FORMAT = (
    "Wrong Access Rootline Element format for a page type element."
)

# =============================================================================
# EXPORTS
# =============================================================================

__all__ = [
    # System
    'VERSION',
    'LOGGER_PREFIX',

    # Grammar
    'PAGE_ID_GROUP_DELIMITER',
    'GROUP_DELIMITER',
    'CONTENT_SELECTOR',
    'RECORD_SELECTOR',

    # Legacy type codes
    'ELEMENT_TYPE_PAGE',
    'ELEMENT_TYPE_CONTENT',
    'ELEMENT_TYPE_RECORD',

    # Errors
    'ERROR_CODE_RECORD_FORMAT',
    'ERROR_CODE_PAGE_FORMAT',
    'ERROR_MESSAGE_RECORD_FORMAT',
    'ERROR_MESSAGE_PAGE_FORMAT',
]

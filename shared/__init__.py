# Rootline - Shared Libraries
"""
Shared core libraries for access rootline handling.

Modules:
    rootline_core: Access rootline element format, parsing and serialization
"""

__version__ = "1.0.0"

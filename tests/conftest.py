"""
Rootline Core Test Configuration
================================

Pytest fixtures and configuration for rootline core tests.
"""

import pytest

from shared.rootline_core.parser import (
    RootlineElementParser,
    RootlineElementParserConfig,
)


@pytest.fixture
def page_token():
    """Page element token in canonical form."""
    return "12:1,2,3"


@pytest.fixture
def content_token():
    """Content element token in canonical form."""
    return "c:5,6"


@pytest.fixture
def record_token():
    """Record element token in canonical form."""
    return "r:7,8"


@pytest.fixture
def canonical_tokens(page_token, content_token, record_token):
    """Tokens that already are in canonical form."""
    return [
        page_token,
        content_token,
        record_token,
        "0:0",
        "4:-1,2,2,9",
        "c:0",
        "r:3,3",
    ]


@pytest.fixture
def parser():
    """Create a parser with default config."""
    return RootlineElementParser()


@pytest.fixture
def quiet_parser():
    """Create a parser that logs nothing."""
    return RootlineElementParser(
        RootlineElementParserConfig(
            log_elements=False,
            log_rejections=False,
            log_coercions=False,
        )
    )

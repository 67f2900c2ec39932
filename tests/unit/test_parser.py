"""
Tests for Rootline Element Parser
=================================

Tests logging, statistics and error propagation of the parser.
"""

import logging

import pytest

from shared.rootline_core import parser as parser_module
from shared.rootline_core.constants import LOGGER_PREFIX
from shared.rootline_core.exceptions import RootlineElementFormatError
from shared.rootline_core.parser import (
    RootlineElementParser,
    RootlineElementParserConfig,
)
from shared.rootline_core.rootline_element import ElementKind, RootlineElement


class TestParsing:
    """Parser results match the bare construction contract."""

    @pytest.mark.parametrize(
        "token", ["12:1,2,3", "c:5,6", "r:7,8", "1,2,3", "c:1,,3", "", "c:1:2"]
    )
    def test_same_result_as_element_parse(self, quiet_parser, token):
        assert quiet_parser.parse(token) == RootlineElement.parse(token)

    def test_error_propagates_unchanged(self, quiet_parser):
        """The format error reaches the caller unchanged."""
        with pytest.raises(RootlineElementFormatError) as exc_info:
            quiet_parser.parse("r:1:2")

        assert exc_info.value.token == "r:1:2"
        assert exc_info.value.element_kind == ElementKind.RECORD


class TestStatistics:
    """Tests for parser statistics."""

    def test_initial_statistics(self, parser):
        stats = parser.get_statistics()

        assert stats["total_tokens"] == 0
        assert stats["approval_rate"] == 0.0
        assert stats["parsed_by_kind"] == {"PAGE": 0, "CONTENT": 0, "RECORD": 0}
        assert stats["rejections_by_kind"] == {}

    def test_counts_parsed_and_rejected(self, quiet_parser):
        quiet_parser.parse("12:1")
        quiet_parser.parse("c:1")
        quiet_parser.parse("r:1")
        for token in ("abc:1", "r:1:2", "1:2:3"):
            with pytest.raises(RootlineElementFormatError):
                quiet_parser.parse(token)

        stats = quiet_parser.get_statistics()

        assert stats["total_tokens"] == 6
        assert stats["parsed"] == 3
        assert stats["rejected"] == 3
        assert stats["approval_rate"] == 0.5
        assert stats["parsed_by_kind"] == {"PAGE": 1, "CONTENT": 1, "RECORD": 1}
        assert stats["rejections_by_kind"] == {"PAGE": 2, "RECORD": 1}

    def test_non_string_token_not_counted(self, quiet_parser):
        """A TypeError leaves total_tokens equal to parsed + rejected."""
        quiet_parser.parse("c:1")
        with pytest.raises(TypeError):
            quiet_parser.parse(12)
        with pytest.raises(RootlineElementFormatError):
            quiet_parser.parse("r:1:2")

        stats = quiet_parser.get_statistics()

        assert stats["total_tokens"] == 2
        assert stats["total_tokens"] == stats["parsed"] + stats["rejected"]
        assert stats["approval_rate"] == 0.5

    def test_counts_coerced_groups(self, quiet_parser):
        quiet_parser.parse("c:1,,x")
        quiet_parser.parse("4:7")

        assert quiet_parser.get_statistics()["coerced_groups"] == 2

    def test_statistics_are_copies(self, quiet_parser):
        quiet_parser.parse("c:1")
        stats = quiet_parser.get_statistics()
        stats["parsed_by_kind"]["CONTENT"] = 99

        assert quiet_parser.get_statistics()["parsed_by_kind"]["CONTENT"] == 1

    def test_reset_statistics(self, quiet_parser):
        quiet_parser.parse("c:1")
        quiet_parser.reset_statistics()

        stats = quiet_parser.get_statistics()
        assert stats["total_tokens"] == 0
        assert stats["parsed"] == 0


class TestLogging:
    """Tests for parser log output."""

    def test_logger_name_uses_prefix(self):
        assert parser_module.logger.name == f"{LOGGER_PREFIX}_Parser"

    def test_rejection_logged(self, parser, caplog):
        with caplog.at_level(logging.WARNING, logger="ROOTLINE_Parser"):
            with pytest.raises(RootlineElementFormatError):
                parser.parse("abc:1,2")

        assert "REJECTED" in caplog.text
        assert "abc:1,2" in caplog.text

    def test_coercion_logged(self, parser, caplog):
        """The lenient group quirk is visible in the log, not changed."""
        with caplog.at_level(logging.WARNING, logger="ROOTLINE_Parser"):
            element = parser.parse("c:1,,3")

        assert element.groups == (1, 0, 3)
        assert "Lenient group coercion" in caplog.text

    def test_clean_token_logs_nothing(self, parser, caplog):
        with caplog.at_level(logging.WARNING, logger="ROOTLINE_Parser"):
            parser.parse("12:1,2,3")

        assert caplog.records == []

    def test_quiet_parser_logs_nothing(self, quiet_parser, caplog):
        with caplog.at_level(logging.DEBUG, logger="ROOTLINE_Parser"):
            quiet_parser.parse("c:1,,3")
            with pytest.raises(RootlineElementFormatError):
                quiet_parser.parse("r:1:2")

        assert caplog.records == []

    def test_element_logged_at_debug(self, caplog):
        parser = RootlineElementParser(RootlineElementParserConfig(log_elements=True))

        with caplog.at_level(logging.DEBUG, logger="ROOTLINE_Parser"):
            parser.parse("r:7,8")

        assert "RECORD" in caplog.text

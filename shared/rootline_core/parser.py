"""
Rootline Core - Rootline Element Parser
=======================================

Parses access rootline element tokens with logging and statistics.

RootlineElement.parse() is the bare construction contract. The parser
wraps it for long-running consumers (indexers) that want to see which
tokens were rejected and which group entries were silently coerced.

Author: Rootline Core Development Team
Version: 1.0.0
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .coercion import int_explode, is_canonical_int, to_int
from .constants import GROUP_DELIMITER, LOGGER_PREFIX
from .exceptions import RootlineElementFormatError
from .rootline_element import ElementKind, RootlineElement, split_token

logger = logging.getLogger(f"{LOGGER_PREFIX}_Parser")


@dataclass
class RootlineElementParserConfig:
    """Configuration for the rootline element parser."""

    # Logging
    log_elements: bool = False
    log_rejections: bool = True
    log_coercions: bool = True  # Lossy group entries, e.g. "" or "12abc"


class RootlineElementParser:
    """
    Rootline element parser with rejection and coercion tracking.

    Example:
        parser = RootlineElementParser(
            RootlineElementParserConfig(log_elements=True)
        )

        element = parser.parse("12:1,2,3")

        stats = parser.get_statistics()
        logger.info(f"Rejected tokens: {stats['rejected']}")
    """

    def __init__(self, config: Optional[RootlineElementParserConfig] = None):
        self.cfg = config or RootlineElementParserConfig()
        self._stats = self._empty_statistics()

        logger.debug(
            f"RootlineElementParser initialized: log_rejections={self.cfg.log_rejections}, "
            f"log_coercions={self.cfg.log_coercions}"
        )

    def parse(self, token: str) -> RootlineElement:
        """
        Parse a single rootline element token.

        Args:
            token: String representation of an access rootline element

        Returns:
            The parsed, immutable element

        Raises:
            RootlineElementFormatError: On wrong access format, re-raised
                unchanged after it has been counted
        """
        try:
            kind, page_id, raw_groups = split_token(token)
        except RootlineElementFormatError as e:
            self._record_rejection(e)
            raise

        # Non-str tokens raise TypeError above and are not counted
        self._stats["total_tokens"] += 1

        pieces = raw_groups.split(GROUP_DELIMITER)
        coerced = [piece for piece in pieces if not is_canonical_int(piece)]
        if coerced:
            self._stats["coerced_groups"] += len(coerced)
            if self.cfg.log_coercions:
                logger.warning(
                    f"Lenient group coercion in {token!r}: "
                    f"{coerced!r} read as {[to_int(piece) for piece in coerced]!r}"
                )

        element = RootlineElement(
            kind=kind,
            page_id=page_id,
            groups=tuple(int_explode(GROUP_DELIMITER, raw_groups)),
        )

        self._stats["parsed"] += 1
        self._stats["parsed_by_kind"][kind.value] += 1

        if self.cfg.log_elements:
            logger.debug(f"Parsed rootline element {token!r} -> {element.to_dict()}")

        return element

    def _record_rejection(self, error: RootlineElementFormatError) -> None:
        """Track a rejected token."""
        self._stats["total_tokens"] += 1
        self._stats["rejected"] += 1

        kind_name = error.element_kind.value
        self._stats["rejections_by_kind"][kind_name] = (
            self._stats["rejections_by_kind"].get(kind_name, 0) + 1
        )

        if self.cfg.log_rejections:
            logger.warning(f"Rootline element REJECTED: {error.token!r} - {error}")

    @staticmethod
    def _empty_statistics() -> Dict[str, Any]:
        return {
            "total_tokens": 0,
            "parsed": 0,
            "rejected": 0,
            "parsed_by_kind": {kind.value: 0 for kind in ElementKind},
            "rejections_by_kind": {},
            "coerced_groups": 0,
        }

    def get_statistics(self) -> Dict[str, Any]:
        """Get parser statistics."""
        return {
            "total_tokens": self._stats["total_tokens"],
            "parsed": self._stats["parsed"],
            "rejected": self._stats["rejected"],
            "approval_rate": (
                self._stats["parsed"] / self._stats["total_tokens"]
                if self._stats["total_tokens"] > 0
                else 0.0
            ),
            "parsed_by_kind": self._stats["parsed_by_kind"].copy(),
            "rejections_by_kind": self._stats["rejections_by_kind"].copy(),
            "coerced_groups": self._stats["coerced_groups"],
        }

    def reset_statistics(self) -> None:
        """Reset statistics counters."""
        self._stats = self._empty_statistics()
        logger.info("RootlineElementParser statistics reset")


# =============================================================================
# EXPORTS
# =============================================================================

__all__ = [
    "RootlineElementParserConfig",
    "RootlineElementParser",
]

"""Warnings raised while parsing AsciiDoc source.

Every document can be parsed, so problems are not reported as errors.
They are reported as warnings, each tied to the place in the source
where it was found.
"""

from __future__ import annotations

import enum
import pprint
from dataclasses import dataclass, field
from typing import Any, Generic, List, TypeVar

T = TypeVar("T")


class WarningType(enum.Enum):
    """Kind of possible parse error that was detected."""

    ATTRIBUTE_VALUE_MISSING_TERMINATING_QUOTE = (
        "An attribute value is missing its terminating quote"
    )
    DOCUMENT_HEADER_NOT_TERMINATED = (
        "Document header wasn't terminated by a blank line "
        "(this line can't be parsed as part of a document header)"
    )
    EMPTY_ATTRIBUTE_VALUE = "An empty attribute value was detected"
    EMPTY_SHORTHAND_ITEM = (
        "A shorthand element attribute marker ('.', '#', or '%') "
        "was found with no subsequent text"
    )
    INVALID_MACRO_NAME = "Macro name is not a valid identifier"
    MACRO_MISSING_ATTRIBUTE_LIST = "Macro missing attribute list"
    MACRO_MISSING_DOUBLE_COLON = "Macro missing :: separator"
    MISSING_COMMA_AFTER_QUOTED_ATTRIBUTE_VALUE = (
        "Missing comma after quoted attribute value"
    )
    UNTERMINATED_DELIMITED_BLOCK = "Closing marker for delimited block not found"
    MISSING_BLOCK_AFTER_TITLE_OR_ATTRIBUTE_LIST = (
        "A block title or attribute list was found without a subsequent block"
    )

    def message(self) -> str:
        """Human-readable description of this kind of warning."""
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Warning:  # noqa: A001 - the name is part of the public interface
    """A possible parse error and the location where it was detected."""

    source: Any
    warning: WarningType

    def message(self) -> str:
        """Human-readable description of this warning."""
        return self.warning.message()

    def __str__(self) -> str:
        return self.message()


class UnexpectedWarningsError(Exception):
    """Raised when a result was expected to carry no warnings but did."""

    def __init__(self, warnings: List[Warning]) -> None:
        self.warnings = list(warnings)
        super().__init__(
            "expected warnings to be empty\n\nfound warnings = "
            + pprint.pformat(self.warnings)
        )


@dataclass
class MatchAndWarnings(Generic[T]):
    """A matched item together with any warnings found while matching it."""

    item: T
    warnings: List[Warning] = field(default_factory=list)

    def unwrap_if_no_warnings(self) -> T:
        """Return the item, or raise if any warnings were recorded."""
        if self.warnings:
            raise UnexpectedWarningsError(self.warnings)
        return self.item
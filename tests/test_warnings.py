import copy

import pytest

from adocwarnings.warnings import (
    MatchAndWarnings,
    UnexpectedWarningsError,
    Warning,
    WarningType,
)


def _warning(source="abc", kind=WarningType.EMPTY_ATTRIBUTE_VALUE):
    return Warning(source=source, warning=kind)


def test_warning_copy_is_equal():
    w1 = _warning()
    w2 = copy.deepcopy(w1)
    assert w1 == w2


def test_warning_inequality_on_kind():
    assert _warning() != _warning(kind=WarningType.INVALID_MACRO_NAME)


def test_warning_inequality_on_source():
    assert _warning(source="abc") != _warning(source="xyz")


def test_warning_message_delegates_to_type():
    w = _warning(kind=WarningType.MACRO_MISSING_DOUBLE_COLON)
    assert w.message() == "Macro missing :: separator"
    assert str(w) == "Macro missing :: separator"


@pytest.mark.parametrize(
    "kind, text",
    [
        (
            WarningType.ATTRIBUTE_VALUE_MISSING_TERMINATING_QUOTE,
            "An attribute value is missing its terminating quote",
        ),
        (WarningType.EMPTY_ATTRIBUTE_VALUE, "An empty attribute value was detected"),
        (WarningType.INVALID_MACRO_NAME, "Macro name is not a valid identifier"),
        (WarningType.MACRO_MISSING_ATTRIBUTE_LIST, "Macro missing attribute list"),
        (
            WarningType.MISSING_COMMA_AFTER_QUOTED_ATTRIBUTE_VALUE,
            "Missing comma after quoted attribute value",
        ),
        (
            WarningType.UNTERMINATED_DELIMITED_BLOCK,
            "Closing marker for delimited block not found",
        ),
        (
            WarningType.MISSING_BLOCK_AFTER_TITLE_OR_ATTRIBUTE_LIST,
            "A block title or attribute list was found without a subsequent block",
        ),
    ],
)
def test_warning_type_messages(kind, text):
    assert kind.message() == text
    assert str(kind) == text


def test_match_and_warnings_copy_is_equal():
    maw1 = MatchAndWarnings(item="xyz", warnings=[_warning()])
    maw2 = copy.deepcopy(maw1)
    assert maw1 == maw2
    assert maw2.warnings == [_warning()]


def test_match_and_warnings_defaults_to_no_warnings():
    maw = MatchAndWarnings(item="xyz")
    assert maw.warnings == []


def test_unwrap_if_no_warnings():
    maw = MatchAndWarnings(item="xyz", warnings=[])
    assert maw.unwrap_if_no_warnings() == "xyz"


def test_unwrap_if_no_warnings_raises():
    maw = MatchAndWarnings(item="xyz", warnings=[_warning()])
    with pytest.raises(UnexpectedWarningsError) as excinfo:
        maw.unwrap_if_no_warnings()
    assert excinfo.value.warnings == [_warning()]
    assert "expected warnings to be empty" in str(excinfo.value)
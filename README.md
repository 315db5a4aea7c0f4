# adocwarnings

These are the types an AsciiDoc parser uses to report possible parse errors, which it calls "warnings".
Any AsciiDoc document can be parsed, so a warning does not stop parsing.
A warning marks a place where the result may differ from what the author meant.

## Contents

The module `adocwarnings.warnings` provides these types:

- `WarningType` is an enumeration of the kinds of warning, for example
  `EMPTY_ATTRIBUTE_VALUE`, `INVALID_MACRO_NAME` or
  `UNTERMINATED_DELIMITED_BLOCK`. `message()` returns a readable description of
  the kind, and `str()` returns the same text.
- `Warning` is a frozen dataclass with two fields. `source` holds the location where
  the condition was found, and `warning` holds its `WarningType`. `message()` and `str()`
  return the description of that type.
- `MatchAndWarnings` is a dataclass that holds a matched `item` and the list of
  `warnings` found while matching it. The list is empty by default.
  `unwrap_if_no_warnings()` returns the item when the list is empty.
- `UnexpectedWarningsError` is raised by `unwrap_if_no_warnings()` when the list
  of warnings is not empty. The warnings are available on its `warnings`
  attribute.

## Example

```python
from adocwarnings.warnings import (
    MatchAndWarnings,
    UnexpectedWarningsError,
    Warning,
    WarningType,
)

clean = MatchAndWarnings(item="xyz")
assert clean.unwrap_if_no_warnings() == "xyz"

w = Warning(source="abc", warning=WarningType.EMPTY_ATTRIBUTE_VALUE)
print(w.message())  # An empty attribute value was detected

try:
    MatchAndWarnings(item="xyz", warnings=[w]).unwrap_if_no_warnings()
except UnexpectedWarningsError as err:
    assert err.warnings == [w]
```

## What this package does not do

This package does not parse AsciiDoc source. It provides only the warning and
result types. It has no span or location type of its own, so a warning's
`source` can hold any value the caller supplies.

## Tests

The tests use pytest. Install it with the package's `test` extra.
"""User-facing messages for ingestion failures."""

from collections.abc import Iterable

SHEET_MALFORMED = "Document is missing content: the header row is empty."
TOO_MANY_RINGS = "More than {max_rings} rings."
SHEET_NOT_FOUND = "Oops! We can't find the sheet '{sheet_name}'. Available sheets: {available}."
MISSING_FIELD = "Row {row} has no value for {fields}."

LOAD_PROBLEM_PREFIX = "Oops! It seems like there are some problems with loading your data."
FAQ_GUIDANCE = (
    "Please check the FAQs at "
    "https://info.thoughtworks.com/visualize-your-tech-strategy-guide.html#faq "
    "for possible solutions."
)


def missing_headers(fields: Iterable[str]) -> str:
    """Message for absent required headers."""
    quoted = ", ".join(f'"{field}"' for field in fields)
    return (
        "Document is missing one or more required headers or they are misspelled. "
        f"Missing: {quoted}."
    )


def colliding_headers(fields: Iterable[str]) -> str:
    """Message for headers that map to the same field after normalization."""
    quoted = ", ".join(f'"{field}"' for field in fields)
    return f"Document has more than one column for: {quoted}."

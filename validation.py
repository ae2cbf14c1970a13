"""
Input validation and parsing utilities.

Handles:
- Folder ID arguments (CLI and environment)
- Browser selection input: "3", "1,3,5", "2-6", "1, 4-5"
"""

import re

# =============================================================================
# PATTERNS
# =============================================================================

FOLDER_ID_PATTERN = re.compile(r'^\s*-?\d+\s*$')
SELECTION_PATTERN = re.compile(r'^[\d,\- ]+$')
INT_PREFIX_PATTERN = re.compile(r'^\s*(\d+)')


# =============================================================================
# FOLDER IDS
# =============================================================================

def parse_folder_id(value: str) -> int:
    """
    Parse a folder ID argument.

    Raises:
        ValueError: If value is not an integer
    """
    if value is None or not FOLDER_ID_PATTERN.match(value):
        raise ValueError(f"Invalid folder ID: {value!r}")
    return int(value)


# =============================================================================
# SELECTIONS
# =============================================================================

def is_selection_input(text: str) -> bool:
    """True if text only contains digits, commas, hyphens and spaces."""
    return bool(SELECTION_PATTERN.match(text))


def _leading_int(text: str) -> int | None:
    match = INT_PREFIX_PATTERN.match(text)
    return int(match.group(1)) if match else None


def parse_selection(text: str, max_value: int) -> list[int]:
    """
    Parse a 1-based selection of menu items.

    Supports single numbers, comma-separated lists and inclusive ranges in
    either direction ("5-1" == "1-5"). Out-of-range and unparseable parts are
    dropped.

    Returns:
        Sorted, de-duplicated item numbers within 1..max_value

    Example:
        parse_selection("1,3-5, 9", 6) -> [1, 3, 4, 5]
    """
    selections: set[int] = set()

    for part in (p.strip() for p in text.split(",")):
        if "-" in part:
            bounds = part.split("-")
            start, end = _leading_int(bounds[0]), _leading_int(bounds[1])
            if start is None or end is None:
                continue
            low, high = min(start, end), max(start, end)
            selections.update(range(max(1, low), min(high, max_value) + 1))
        else:
            num = _leading_int(part)
            if num is not None and 1 <= num <= max_value:
                selections.add(num)

    return sorted(selections)

"""Presentation helpers shared by the apps commands."""

from datetime import datetime
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

KB = 1024
MB = 1024 * KB
GB = 1024 * MB

# Non-ISO layouts the API has been seen to return
DATE_FORMATS = (
    "%Y/%m/%d %H:%M:%S %z",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%d %H:%M:%S %z",
)


def format_bytes(amount: Any) -> str:
    """Render a byte count the way the API dashboard does (1k, 2M, 3G)."""
    amount = int(amount or 0)
    if amount == 0:
        return "(empty)"
    if amount < KB:
        return str(amount)
    if amount < MB:
        return f"{amount // KB}k"
    if amount < GB:
        return f"{amount // MB}M"
    return f"{amount // GB}G"


def format_date(value: Union[str, datetime]) -> str:
    """Render a date string or datetime as 'YYYY-MM-DD HH:MM TZ'.

    Strings that match none of the known formats are returned unchanged.
    """
    if isinstance(value, str):
        parsed = parse_date(value)
        if parsed is None:
            return value
        value = parsed
    return value.strftime("%Y-%m-%d %H:%M %Z").rstrip()


def parse_date(text: str) -> Optional[datetime]:
    """Parse ISO-8601 or one of DATE_FORMATS, None when nothing matches."""
    text = text.strip()
    # fromisoformat only accepts a trailing Z from Python 3.11
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def quantify(word: str, count: int) -> str:
    """Pluralize: quantify('table', 2) -> '2 tables'."""
    count = int(count)
    return f"{count} {word if count == 1 else word + 's'}"


def styled_header(title: str) -> str:
    return f"=== {title}"


def styled_hash(items: Iterable[Tuple[str, Any]]) -> List[str]:
    """Render label/value pairs as aligned 'Label: value' lines.

    Sequence values are sorted and printed one element per line, the first
    next to the label and the rest indented under it. None and empty
    sequences are skipped.
    """
    rows = [(label, value) for label, value in items if value is not None]
    rows = [
        (label, value)
        for label, value in rows
        if not (_is_sequence(value) and len(value) == 0)
    ]
    if not rows:
        return []

    width = max(len(label) for label, _ in rows) + 2
    lines = []
    for label, value in rows:
        prefix = f"{label}: ".ljust(width)
        if _is_sequence(value):
            elements = sorted(str(element) for element in value)
            lines.append(f"{prefix}{elements[0]}")
            lines.extend(f"{' ' * width}{element}" for element in elements[1:])
        else:
            lines.append(f"{prefix}{value}")
    return lines


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str)

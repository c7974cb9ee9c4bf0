"""
Touchstone record assembly.

Scans raw lines once, collecting comments and the option line, and joins
indented continuation lines into one record per frequency point.
"""

import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field

from .errors import IncompleteRecordError, InputMissingError, NoDataFoundError
from .header import OptionsHeader, parse_options_line

# Optional sign, digits with at most one decimal point, optional exponent
NUMERIC_TOKEN = re.compile(r"^[+-]?(?:\d+\.?\d*|\d*\.?\d+)(?:[eE][+-]?\d+)?$")


@dataclass(frozen=True)
class Record:
    """One frequency point: verbatim frequency token plus its values."""

    frequency_token: str
    values: tuple[str, ...]
    line_number: int = 0

    def is_complete(self, expected: int) -> bool:
        """Check whether the record carries at least `expected` values."""
        return len(self.values) >= expected


@dataclass
class TouchstoneScan:
    """Result of a full scan: option line, comments and records."""

    options: OptionsHeader = field(default_factory=OptionsHeader)
    comments: list[str] = field(default_factory=list)
    records: list[Record] = field(default_factory=list)
    header_found: bool = False


def expected_value_count(n_ports: int) -> int:
    """Number of values per record for an N-port (2*N^2)."""
    return 2 * n_ports * n_ports


def split_lines(text: str) -> list[str]:
    """Split text on \\n or \\r\\n."""
    return re.split(r"\r?\n", text)


def numeric_tokens(line: str) -> list[str]:
    """
    Extract numeric tokens from a data line.

    Text after '!' is an inline comment. Tokens that are not numeric
    literals are dropped.
    """
    content = line.split("!", 1)[0]
    return [t for t in content.split() if NUMERIC_TOKEN.match(t)]


def _is_marker_line(stripped: str) -> bool:
    return stripped.startswith("!") or stripped.startswith("#")


def iter_records(lines: list[str], n_ports: int) -> Iterator[Record]:
    """
    Yield records from raw lines.

    A record starts on any non-blank line that is neither a comment nor an
    option line and holds at least one numeric token. While its body is
    shorter than 2*N^2 values, following non-blank lines that begin with
    whitespace are appended. Short records are yielded as-is; use
    require_complete() to enforce the length.

    Args:
        lines: Physical lines of the file
        n_ports: Port count N

    Yields:
        Record per frequency point
    """
    expected = expected_value_count(n_ports)
    i = 0
    while i < len(lines):
        raw = lines[i]
        stripped = raw.strip()
        if not stripped or _is_marker_line(stripped):
            i += 1
            continue

        tokens = numeric_tokens(raw)
        if not tokens:
            i += 1
            continue

        start = i
        values = tokens[1:]

        # Only indented lines continue a record
        while len(values) < expected and i + 1 < len(lines):
            following = lines[i + 1]
            following_stripped = following.strip()
            if not following_stripped or _is_marker_line(following_stripped):
                break
            if not following[0].isspace():
                break
            values.extend(numeric_tokens(following))
            i += 1

        yield Record(
            frequency_token=tokens[0], values=tuple(values), line_number=start + 1
        )
        i += 1


def require_complete(records: Iterable[Record], n_ports: int) -> list[Record]:
    """
    Ensure every record carries 2*N^2 values.

    Raises:
        IncompleteRecordError: On the first short record
        NoDataFoundError: If there are no records at all
    """
    expected = expected_value_count(n_ports)
    checked = []
    for record in records:
        if not record.is_complete(expected):
            raise IncompleteRecordError(
                record.frequency_token, expected, len(record.values)
            )
        checked.append(record)
    if not checked:
        raise NoDataFoundError()
    return checked


def scan_touchstone(
    text: str,
    n_ports: int,
    log_callback: Callable[[str, str], None] | None = None,
) -> TouchstoneScan:
    """
    Scan Touchstone text into option line, comments and records.

    Only the first option line is honored.

    Args:
        text: Full file contents
        n_ports: Port count N
        log_callback: Optional callback(message, level)

    Returns:
        TouchstoneScan

    Raises:
        InputMissingError: If text is empty or not a string
        NoDataFoundError: If no record was found
    """
    if not isinstance(text, str) or not text.strip():
        raise InputMissingError()

    lines = split_lines(text)
    scan = TouchstoneScan()

    for number, raw in enumerate(lines, start=1):
        stripped = raw.strip()
        if stripped.startswith("!"):
            scan.comments.append(stripped)
        elif stripped.startswith("#"):
            if scan.header_found:
                if log_callback:
                    log_callback(
                        f"Ignoring additional option line {number}: {stripped}",
                        "warning",
                    )
                continue
            scan.options = parse_options_line(stripped)
            scan.header_found = True
            if log_callback:
                log_callback(f"Option line: {scan.options.option_line()}", "debug")

    scan.records = list(iter_records(lines, n_ports))
    if not scan.records:
        raise NoDataFoundError()

    if log_callback:
        log_callback(f"Found {len(scan.records)} records", "info")

    return scan

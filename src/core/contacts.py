"""Contact extraction from pasted spreadsheet rows (core domain)."""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Iterable, List, Optional

from core.models import Contact, RawRow

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
COLUMN_SEPARATOR = re.compile(r"\t|\s{2,}")
NAME_PUNCTUATION = re.compile(r"[,;:|<>(){}\[\]]")

# Spreadsheet exports carry the ignore flag in the 8th column.
MIN_COLUMNS = 8
NAME_COLUMN = 2
EMAIL_COLUMN = 3
IGNORE_COLUMN = 7
IGNORE_VALUE = "sim"


@dataclass(frozen=True)
class RowSummary:
    """Counters shown next to the parsed contact table."""

    total: int
    valid: int
    ignored: int


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.fullmatch(value))


def _non_blank_lines(raw_text: str) -> List[str]:
    return [line.rstrip("\r") for line in raw_text.split("\n") if line.strip()]


def split_columns(line: str) -> List[str]:
    """Split a line on tabs or runs of 2+ whitespace, keeping empty cells."""

    return [column.strip() for column in COLUMN_SEPARATOR.split(line)]


def _is_ignored(columns: List[str]) -> bool:
    return columns[IGNORE_COLUMN].strip().lower() == IGNORE_VALUE


def _fallback_contact(line: str) -> Optional[Contact]:
    match = EMAIL_PATTERN.search(line)
    if not match:
        return None
    email = match.group(0)
    name = line.replace(email, "", 1).strip()
    name = NAME_PUNCTUATION.sub("", name).strip()
    if len(name) < 2:
        name = email.split("@", 1)[0]
    return Contact(name=name, email=email)


def _columnar_contact(columns: List[str]) -> Optional[Contact]:
    if _is_ignored(columns):
        return None
    return Contact(name=columns[NAME_COLUMN], email=columns[EMAIL_COLUMN])


def extract_contacts(raw_text: str) -> List[Contact]:
    """Return every qualifying contact in input line order.

    Lines with at least 8 columns are read positionally (name in column 3,
    email in column 4, ignore flag in column 8). Shorter lines fall back to
    scanning for the first email-looking substring. Rows that fail either
    path are skipped; duplicates are kept.
    """

    contacts: List[Contact] = []
    for line in _non_blank_lines(raw_text or ""):
        columns = split_columns(line)
        if len(columns) >= MIN_COLUMNS:
            contact = _columnar_contact(columns)
        else:
            contact = _fallback_contact(line)

        if contact is None:
            continue
        if not contact.name or not contact.email or not is_valid_email(contact.email):
            continue
        contacts.append(contact)
    return contacts


def parse_rows(raw_text: str) -> List[RawRow]:
    """Return the columnar view of every non-blank line, padded to 8 columns."""

    rows: List[RawRow] = []
    for line in _non_blank_lines(raw_text or ""):
        columns = split_columns(line)
        while len(columns) < MIN_COLUMNS:
            columns.append("")
        rows.append(
            RawRow(
                raw_line=line,
                columns=tuple(columns),
                should_ignore=_is_ignored(columns),
                name=columns[NAME_COLUMN],
                email=columns[EMAIL_COLUMN],
            )
        )
    return rows


def summarize_rows(rows: Iterable[RawRow]) -> RowSummary:
    rows = list(rows)
    valid = sum(1 for row in rows if not row.should_ignore and row.email)
    ignored = sum(1 for row in rows if row.should_ignore)
    return RowSummary(total=len(rows), valid=valid, ignored=ignored)

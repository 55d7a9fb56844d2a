"""Log Parser - Turn plain `svn log` output into revision records."""

import re
from dataclasses import dataclass

# `svn log` separates entries with a line of 72 hyphens
LOG_DIVIDER = "-" * 72

# r1024 | jdoe | 2024-01-15 10:32:11 +0100 (Mon, 15 Jan 2024) | 3 lines
HEADER_PATTERN = re.compile(r'^r(\d+)\s*\|\s*([^|]+)\s*\|\s*([^|]+)\s*\|\s*\d+\s*lines?\s*$')

MAX_MESSAGE_LENGTH = 60
ELLIPSIS = "..."


@dataclass(frozen=True)
class Revision:
    """A single log entry."""
    number: str
    author: str
    date: str
    message: str


def collapse_message(lines: list[str]) -> str:
    """Join message lines into one capped line."""
    message = ' '.join(line.strip() for line in lines if line.strip())
    if len(message) > MAX_MESSAGE_LENGTH:
        message = message[:MAX_MESSAGE_LENGTH - len(ELLIPSIS)] + ELLIPSIS
    return message


def parse_entry(entry: str) -> Revision | None:
    """Parse one divider-delimited entry, or None if it isn't a revision."""
    entry = entry.strip()
    if not entry:
        return None

    lines = entry.split('\n')
    if len(lines) < 2:
        return None

    match = HEADER_PATTERN.match(lines[0].strip())
    if not match:
        return None

    return Revision(
        number=f"r{match.group(1)}",
        author=match.group(2).strip(),
        date=match.group(3).strip(),
        message=collapse_message(lines[1:]),
    )


def parse_log(log_text: str) -> list[Revision]:
    """Parse `svn log` text into revisions, newest first.

    Best effort: entries that don't match the header grammar are dropped,
    and text with no entries at all yields an empty list.
    """
    revisions = []
    for entry in log_text.split(LOG_DIVIDER):
        revision = parse_entry(entry)
        if revision is not None:
            revisions.append(revision)
    return revisions

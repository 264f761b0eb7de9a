"""
Text heuristics shared by the extraction strategies.

Patterns for clock times, dates and scores, plus the line filters that decide
whether a piece of text could be a team name.
"""

import re
from typing import List, Optional, Tuple

from bs4 import Tag

CLOCK_PATTERN = re.compile(r'\d{2}:\d{2}')
DATE_PATTERN = re.compile(r'\d{2}\.\d{2}\.\d{4}')
SCORE_PATTERN = re.compile(r'\d+\s*[-–]\s*\d+')

# Turkish labels for stadium / away / home, never team names
VENUE_KEYWORDS = ['stadyum', 'deplasman', 'ev sahibi']

MIN_LINE_LENGTH = 3


def find_clock(text: str) -> Optional[str]:
    match = CLOCK_PATTERN.search(text or "")
    return match.group(0) if match else None


def find_date(text: str) -> Optional[str]:
    match = DATE_PATTERN.search(text or "")
    return match.group(0) if match else None


def has_score(text: str) -> bool:
    return bool(SCORE_PATTERN.search(text or ""))


def mentions_venue(text: str) -> bool:
    lowered = (text or "").lower()
    return any(keyword in lowered for keyword in VENUE_KEYWORDS)


def split_lines(text: str) -> List[str]:
    """Split text into trimmed lines longer than two characters."""
    lines = []
    for line in (text or "").split('\n'):
        line = line.strip()
        if len(line) >= MIN_LINE_LENGTH:
            lines.append(line)
    return lines


def is_team_candidate(line: str) -> bool:
    """A line that is not a time, date, score or venue label."""
    return (
        len(line) >= MIN_LINE_LENGTH
        and not CLOCK_PATTERN.search(line)
        and not DATE_PATTERN.search(line)
        and not SCORE_PATTERN.search(line)
        and not mentions_venue(line)
    )


def element_text(element: Optional[Tag]) -> str:
    """Visible text of an element with whitespace collapsed."""
    if element is None:
        return ""
    return " ".join(element.get_text(" ", strip=True).split())


def has_class_marker(tag, marker: str) -> bool:
    """True if any class on ``tag`` contains ``marker`` (like ``[class*=marker]``)."""
    if not isinstance(tag, Tag):
        return False
    classes = tag.get('class') or []
    if isinstance(classes, str):
        classes = [classes]
    return marker in " ".join(classes)


def split_date_time(date_text: str, time_text: str) -> Tuple[str, str]:
    """
    Separate date context from clock time.

    ``date_text`` comes from the first time element and ``time_text`` from the
    last one. When the date text itself carries a clock, whitespace-separated
    tokens are split so that the last token is the time and the rest is the
    date; a single token has its clock cut out.

    Returns:
        (date, time) where time is ``HH:MM`` or empty
    """
    date_text = (date_text or "").strip()
    time_text = (time_text or "").strip()

    if date_text and CLOCK_PATTERN.search(date_text):
        parts = date_text.split()
        if len(parts) > 1:
            date_text = " ".join(parts[:-1])
            time_text = parts[-1]
        else:
            time_text = find_clock(date_text) or ""
            date_text = CLOCK_PATTERN.sub("", date_text, count=1).strip()

    return date_text, find_clock(time_text) or ""

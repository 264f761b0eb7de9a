"""
Extraction strategies.

Each strategy is a pure function ``(html, team) -> List[MatchRecord]``:
1. structured_scan - Flashscore event__match blocks and their class markers
2. line_scan - page text read line by line through a MatchAccumulator
"""

import logging
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from app.config import TeamConfig
from .accumulator import MatchAccumulator
from .heuristics import (
    element_text, find_clock, find_date, has_class_marker, has_score,
    is_team_candidate, split_date_time, split_lines,
)
from .models import MatchRecord, normalize_team, teams_differ

logger = logging.getLogger(__name__)

MATCH_SELECTOR = '[class*="event__match"]'
TIME_SELECTOR = '[class*="event__time"]'
SCORE_SELECTOR = '[class*="event__score"]'
HEADER_MARKER = 'event__header'

# Tried in order, first marker with text wins
HOME_MARKERS = ['event__participant--home', 'homeParticipant', 'participant--home']
AWAY_MARKERS = ['event__participant--away', 'awayParticipant', 'participant--away']
PARTICIPANT_MARKER = 'participant'

NON_TEXT_TAGS = ['script', 'style', 'noscript', 'template']


def parse_html(html: str) -> BeautifulSoup:
    soup = BeautifulSoup(html or "", 'html.parser')
    for tag in soup.find_all(NON_TEXT_TAGS):
        tag.decompose()
    return soup


def _first_marked_text(block: Tag, markers: List[str]) -> str:
    for marker in markers:
        for element in block.select(f'[class*="{marker}"]'):
            text = element_text(element)
            if text:
                return text
    return ""


def _block_date_time(block: Tag) -> Tuple[str, str]:
    time_elements = block.select(TIME_SELECTOR)
    date_text = element_text(time_elements[0]) if time_elements else ""
    time_text = element_text(time_elements[-1]) if time_elements else ""

    # Grouped layouts keep the date on an enclosing header row
    if len(date_text) < 3:
        if has_class_marker(block, HEADER_MARKER):
            header = block
        else:
            header = block.find_parent(lambda tag: has_class_marker(tag, HEADER_MARKER))
        if header is not None:
            header_text = " ".join(
                text for text in (element_text(el) for el in header.select(TIME_SELECTOR)) if text
            )
            date_text = header_text or date_text

    return split_date_time(date_text, time_text)


def _block_teams(block: Tag) -> Tuple[str, str]:
    home = _first_marked_text(block, HOME_MARKERS)
    away = _first_marked_text(block, AWAY_MARKERS)

    if not home or not away:
        participants = [
            element for element in block.select(f'[class*="{PARTICIPANT_MARKER}"]')
            if not has_class_marker(element, 'event__time')
            and not has_class_marker(element, 'event__score')
        ]
        if len(participants) >= 2:
            home_text = element_text(participants[0])
            away_text = element_text(participants[1])
            if home_text and away_text and home_text != away_text:
                home, away = home_text, away_text

    return home, away


def _scan_block_lines(block: Tag, date: str, time: str) -> Tuple[str, str, List[str]]:
    """Recover missing date/time and distinct team-like lines from block text."""
    team_names: List[str] = []
    seen = set()
    for line in split_lines(block.get_text('\n')):
        if not time:
            time = find_clock(line) or ""
        if not date:
            date = find_date(line) or ""
        if is_team_candidate(line):
            normalized = normalize_team(line)
            if normalized not in seen:
                seen.add(normalized)
                team_names.append(line)
    return date, time, team_names


def _block_to_record(block: Tag, team: TeamConfig) -> Optional[MatchRecord]:
    # Home and away goals usually sit in separate score elements
    score_text = " - ".join(
        text for text in (element_text(el) for el in block.select(SCORE_SELECTOR)) if text
    )
    if has_score(score_text) or any(has_score(line) for line in split_lines(block.get_text('\n'))):
        logger.debug("[extractor] Skipping played match block")
        return None

    date, time = _block_date_time(block)
    home, away = _block_teams(block)

    if not teams_differ(home, away):
        if home and away:
            home, away = "", ""
        date, time, team_names = _scan_block_lines(block, date, time)
        if len(team_names) >= 2 and teams_differ(team_names[0], team_names[1]):
            home, away = team_names[0], team_names[1]

    if not time or not teams_differ(home, away):
        logger.info(f"[extractor] Skipping candidate with invalid data: time={time!r} home={home!r} away={away!r}")
        return None

    return MatchRecord(
        date=date,
        time=time,
        home_team=home,
        away_team=away,
        venue=team.venue_for(home),
    )


def structured_scan(html: str, team: Optional[TeamConfig] = None) -> List[MatchRecord]:
    """Stage A: read match blocks identified by their class markers."""
    team = team or TeamConfig()
    soup = parse_html(html)
    candidates = soup.select(MATCH_SELECTOR)
    logger.debug(f"[extractor] structured_scan: {len(candidates)} candidate blocks")

    records: List[MatchRecord] = []
    seen_keys = set()
    for block in candidates:
        record = _block_to_record(block, team)
        if record is None:
            continue
        if record.key() in seen_keys:
            continue
        seen_keys.add(record.key())
        records.append(record)

    return records


def line_scan(html: str, team: Optional[TeamConfig] = None) -> List[MatchRecord]:
    """
    Stage B: walk the page text line by line.

    A clock line (that is not a score) opens a match, a date line attaches to
    it, and the next two distinct team-like lines fill home and away. Lines
    before the first clock line are ignored.
    """
    soup = parse_html(html)
    root = soup.body or soup
    accumulator = MatchAccumulator(team)

    for line in split_lines(root.get_text('\n')):
        clock = find_clock(line)
        if clock and not has_score(line):
            accumulator.start(clock)

        date = find_date(line)
        if date:
            accumulator.attach_date(date)

        if accumulator.is_open and is_team_candidate(line):
            accumulator.offer_team(line)

    return accumulator.finish()

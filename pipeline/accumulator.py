"""
Line-scan accumulator.

Holds the fields of the match currently being read from page text and commits
it when the next match starts or the input ends.
"""

import logging
from enum import Enum
from typing import List, Optional, Set, Tuple

from app.config import TeamConfig
from .models import MatchRecord, normalize_team, teams_differ

logger = logging.getLogger(__name__)


class AccumulatorState(Enum):
    EMPTY = "empty"
    TIME_KNOWN = "time_known"
    HOME_KNOWN = "home_known"
    COMPLETE = "complete"


class MatchAccumulator:
    """
    Finite-state accumulator for the line-scan strategy.

    States:
    - EMPTY: no match open, date and team lines are ignored
    - TIME_KNOWN: a clock line opened a match
    - HOME_KNOWN: the first team line was taken as home team
    - COMPLETE: a distinct away team was found, venue is set
    """

    def __init__(self, team: Optional[TeamConfig] = None):
        self.team = team or TeamConfig()
        self.records: List[MatchRecord] = []
        self._committed_keys: Set[Tuple[str, str, str]] = set()
        self._reset()

    def _reset(self):
        self.state = AccumulatorState.EMPTY
        self.date = ""
        self.time = ""
        self.home_team = ""
        self.away_team = ""
        self.venue = ""
        self._seen: Set[str] = set()

    @property
    def is_open(self) -> bool:
        return self.state is not AccumulatorState.EMPTY

    def start(self, time: str):
        """Open a new match at ``time``, committing the previous one first."""
        self._commit()
        self._reset()
        self.time = time
        self.state = AccumulatorState.TIME_KNOWN

    def attach_date(self, date: str):
        if self.is_open:
            self.date = date

    def offer_team(self, name: str):
        name = name.strip()
        normalized = normalize_team(name)
        if not normalized:
            return

        if self.state is AccumulatorState.TIME_KNOWN:
            self.home_team = name
            self._seen.add(normalized)
            self.state = AccumulatorState.HOME_KNOWN
        elif self.state is AccumulatorState.HOME_KNOWN:
            if normalized in self._seen or normalized == normalize_team(self.home_team):
                return
            self.away_team = name
            self._seen.add(normalized)
            self.venue = self.team.venue_for(self.home_team)
            self.state = AccumulatorState.COMPLETE

    def finish(self) -> List[MatchRecord]:
        """Commit the open match, if complete, and return everything collected."""
        self._commit()
        self._reset()
        return self.records

    def _commit(self):
        if self.state is not AccumulatorState.COMPLETE:
            if self.is_open:
                logger.debug(f"[extractor] Dropping incomplete match at {self.time} (state={self.state.value})")
            return
        if not teams_differ(self.home_team, self.away_team):
            logger.info(f"[extractor] Dropping match with identical teams: {self.home_team!r} vs {self.away_team!r}")
            return
        record = MatchRecord(
            date=self.date,
            time=self.time,
            home_team=self.home_team,
            away_team=self.away_team,
            venue=self.venue,
        )
        if record.key() in self._committed_keys:
            logger.debug(f"[extractor] Skipping duplicate match {record.key()}")
            return
        self._committed_keys.add(record.key())
        self.records.append(record)

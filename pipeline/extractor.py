"""
Main extraction orchestrator.

Runs the strategies in priority order and stops at the first one that
produces records:
1. Structured selector scan (event__match blocks)
2. Line-scan fallback over the page text

The surviving records then pass a final consistency filter. Extraction never
raises: unusable markup yields fewer or zero records.
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from app.config import TeamConfig
from .models import MatchRecord
from .strategies import line_scan, structured_scan

logger = logging.getLogger(__name__)

Strategy = Callable[[str, Optional[TeamConfig]], List[MatchRecord]]

DEFAULT_STRATEGIES: Tuple[Tuple[str, Strategy], ...] = (
    ('structured', structured_scan),
    ('line_scan', line_scan),
)


def final_filter(records: List[MatchRecord]) -> List[MatchRecord]:
    """Drop invalid records (no time, empty or identical teams) and repeated (home, away, time) triples."""
    filtered = []
    seen_keys = set()
    for record in records:
        if not record.is_valid():
            logger.info(
                f"[extractor] Filtered out invalid match: "
                f"{record.home_team!r} vs {record.away_team!r} at {record.time!r}"
            )
            continue
        if record.key() in seen_keys:
            logger.info(f"[extractor] Filtered out duplicate match: {record.key()}")
            continue
        seen_keys.add(record.key())
        filtered.append(record)
    return filtered


class FixtureExtractor:
    """Fixture extraction orchestrator."""

    def __init__(self, team: Optional[TeamConfig] = None,
                 strategies: Optional[Sequence[Tuple[str, Strategy]]] = None):
        self.team = team or TeamConfig()
        self.strategies = tuple(strategies) if strategies is not None else DEFAULT_STRATEGIES

    def extract(self, html: str) -> List[MatchRecord]:
        """
        Extract upcoming matches from rendered page HTML.

        Args:
            html: Rendered page markup

        Returns:
            Deduplicated, filtered match records (possibly empty)
        """
        for name, strategy in self.strategies:
            try:
                records = strategy(html, self.team)
            except Exception as e:
                logger.error(f"[extractor] Strategy {name} failed: {e}", exc_info=True)
                records = []

            if records:
                logger.info(f"[extractor] Strategy {name} produced {len(records)} matches")
                return final_filter(records)

            logger.info(f"[extractor] Strategy {name} found no matches, trying next")

        return []


def extract_fixtures(html: str, team: Optional[TeamConfig] = None) -> List[MatchRecord]:
    return FixtureExtractor(team=team).extract(html)

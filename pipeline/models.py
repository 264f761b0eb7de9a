"""
Match record model and its JSON shape.
"""
from dataclasses import dataclass
from typing import Dict, Tuple


def normalize_team(name: str) -> str:
    return (name or "").strip().lower()


def teams_differ(home: str, away: str) -> bool:
    """Both names present and different once trimmed and lowercased."""
    home_norm = normalize_team(home)
    away_norm = normalize_team(away)
    return bool(home_norm) and bool(away_norm) and home_norm != away_norm


@dataclass
class MatchRecord:
    """One upcoming fixture of the tracked team."""
    date: str
    time: str
    home_team: str
    away_team: str
    venue: str = ""

    def key(self) -> Tuple[str, str, str]:
        return (self.home_team, self.away_team, self.time)

    def is_valid(self) -> bool:
        return bool(self.time) and teams_differ(self.home_team, self.away_team)

    def to_dict(self) -> Dict[str, str]:
        return {
            "tarih": self.date or "",
            "saat": self.time,
            "evSahibi": self.home_team,
            "deplasman": self.away_team,
            "stadyum": self.venue,
        }

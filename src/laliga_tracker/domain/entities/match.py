# Directory: src/laliga_tracker/domain/entities/match.py
from dataclasses import dataclass, field
from typing import List, Optional

from laliga_tracker.constants import DEFAULT_EXTRA_TIME


@dataclass
class Match:
    """
    Example match data:
    {
        'id': 1,
        'homeTeam': 'Real Madrid',
        'awayTeam': 'Barcelona',
        'matchDate': '2025-05-10',
        'extraTime': '05:00'
    }
    """
    id: Optional[int]
    home_team: str
    away_team: str
    match_date: str  # free-form, usually YYYY-MM-DD
    extra_time: Optional[str] = DEFAULT_EXTRA_TIME  # MM:SS

    def has_team(self, team: str) -> bool:
        """Case-sensitive check against the home and away team names."""
        return team == self.home_team or team == self.away_team


@dataclass
class MatchEvent:
    """A goal, yellow card or red card. The kind is implied by the collection it lives in."""
    id: int
    team: str
    player: str
    minute: str  # MM:SS


@dataclass
class EventCounts:
    goals: int = 0
    yellow_cards: int = 0
    red_cards: int = 0


@dataclass
class MatchSummary:
    """A match with per-team event counts, derived at read time."""
    match: Match
    home: EventCounts = field(default_factory=EventCounts)
    away: EventCounts = field(default_factory=EventCounts)


@dataclass
class MatchDetails(MatchSummary):
    goals: List[MatchEvent] = field(default_factory=list)
    yellow_cards: List[MatchEvent] = field(default_factory=list)
    red_cards: List[MatchEvent] = field(default_factory=list)

# Directory: src/laliga_tracker/infra/api_routes/schemas.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from laliga_tracker.domain.entities.match import Match, MatchDetails, MatchEvent, MatchSummary


class CamelModel(BaseModel):
    """JSON uses camelCase keys, Python uses snake_case attributes."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ------------------------------------------------------------------
# Request bodies
# ------------------------------------------------------------------

# Missing fields default to "" so the repository reports them the same
# way as empty ones.

class MatchPayload(CamelModel):
    home_team: str = ""
    away_team: str = ""
    match_date: str = ""


class EventPayload(CamelModel):
    team: str = ""
    player: str = ""
    minute: str = ""


class ExtraTimePayload(CamelModel):
    extra_time: str = ""


# ------------------------------------------------------------------
# Responses
# ------------------------------------------------------------------

class MessageResponse(BaseModel):
    message: str


class EventRegisteredResponse(MessageResponse):
    id: int


class MatchEventResponse(BaseModel):
    id: int
    team: str
    player: str
    minute: str

    @classmethod
    def from_domain(cls, event: MatchEvent) -> "MatchEventResponse":
        return cls(id=event.id, team=event.team, player=event.player, minute=event.minute)


class MatchResponse(CamelModel):
    id: int
    home_team: str
    away_team: str
    match_date: str
    extra_time: Optional[str] = None

    @classmethod
    def from_domain(cls, match: Match) -> "MatchResponse":
        return cls(
            id=match.id,
            home_team=match.home_team,
            away_team=match.away_team,
            match_date=match.match_date,
            extra_time=match.extra_time,
        )


class MatchSummaryResponse(MatchResponse):
    home_goals: int = 0
    away_goals: int = 0
    home_yellow_cards_count: int = 0
    home_red_cards_count: int = 0
    away_yellow_cards_count: int = 0
    away_red_cards_count: int = 0

    @classmethod
    def _fields_from_summary(cls, summary: MatchSummary) -> dict:
        match = summary.match
        return dict(
            id=match.id,
            home_team=match.home_team,
            away_team=match.away_team,
            match_date=match.match_date,
            extra_time=match.extra_time,
            home_goals=summary.home.goals,
            away_goals=summary.away.goals,
            home_yellow_cards_count=summary.home.yellow_cards,
            home_red_cards_count=summary.home.red_cards,
            away_yellow_cards_count=summary.away.yellow_cards,
            away_red_cards_count=summary.away.red_cards,
        )

    @classmethod
    def from_summary(cls, summary: MatchSummary) -> "MatchSummaryResponse":
        return cls(**cls._fields_from_summary(summary))


class MatchDetailResponse(MatchSummaryResponse):
    goals: List[MatchEventResponse] = Field(default_factory=list, alias="goals")
    yellow_cards: List[MatchEventResponse] = Field(default_factory=list, alias="yellow_cards")
    red_cards: List[MatchEventResponse] = Field(default_factory=list, alias="red_cards")

    @classmethod
    def from_details(cls, details: MatchDetails) -> "MatchDetailResponse":
        return cls(
            **cls._fields_from_summary(details),
            goals=[MatchEventResponse.from_domain(e) for e in details.goals],
            yellow_cards=[MatchEventResponse.from_domain(e) for e in details.yellow_cards],
            red_cards=[MatchEventResponse.from_domain(e) for e in details.red_cards],
        )

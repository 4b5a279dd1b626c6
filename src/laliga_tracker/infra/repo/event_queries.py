# Directory: src/laliga_tracker/infra/repo/event_queries.py
from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from laliga_tracker.domain.entities.match import EventCounts, MatchEvent
from laliga_tracker.domain.value_objects.event_kind import EventKind
from laliga_tracker.infra.models import EVENT_MODELS

# (match_id, team) -> number of events
TeamCounts = Dict[Tuple[int, str], int]


def count_events(
    session: Session,
    kind: EventKind,
    match_ids: Optional[Iterable[int]] = None
) -> TeamCounts:
    """
    Count events of one kind grouped by (match_id, team).
    One query per kind, optionally restricted to some matches.
    """
    model = EVENT_MODELS[kind]
    query = (
        session.query(model.match_id, model.team, func.count(model.id))
        .group_by(model.match_id, model.team)
    )
    if match_ids is not None:
        query = query.filter(model.match_id.in_(list(match_ids)))
    return {(match_id, team): count for match_id, team, count in query.all()}


def fetch_events(session: Session, kind: EventKind, match_id: int) -> List[MatchEvent]:
    """All events of one kind for a match, in insertion order."""
    model = EVENT_MODELS[kind]
    rows = (
        session.query(model)
        .filter_by(match_id=match_id)
        .order_by(model.id.asc())
        .all()
    )
    return [
        MatchEvent(id=row.id, team=row.team, player=row.player, minute=row.minute)
        for row in rows
    ]


def tally(counts: Dict[EventKind, TeamCounts], match_id: int, team: str) -> EventCounts:
    """Pick one team's counts out of the per-kind grouped counts."""
    key = (match_id, team)
    return EventCounts(
        goals=counts[EventKind.GOAL].get(key, 0),
        yellow_cards=counts[EventKind.YELLOW_CARD].get(key, 0),
        red_cards=counts[EventKind.RED_CARD].get(key, 0),
    )

# Directory: src/laliga_tracker/infra/repo/event_ledger.py
import logging
from typing import Iterable, List, Optional, Union

from laliga_tracker.constants import MSG_TEAM_NOT_IN_MATCH
from laliga_tracker.domain.entities.match import MatchEvent
from laliga_tracker.domain.errors import ValidationError
from laliga_tracker.domain.validation import require_fields, require_time_format
from laliga_tracker.domain.value_objects.event_kind import EventKind
from laliga_tracker.infra.db import SessionFactory, session_scope
from laliga_tracker.infra.models import EVENT_MODELS
from laliga_tracker.infra.repo.event_queries import TeamCounts, count_events, fetch_events
from laliga_tracker.infra.repo.match_repo import MatchRepository


class EventLedger:
    """
    Append-only store of goals, yellow cards and red cards.

    Events are never edited or deleted here. The match repository is only
    used to check that the match exists and that the team plays in it.
    """
    def __init__(
        self,
        session_factory: SessionFactory,
        match_repository: MatchRepository,
        logger: Optional[logging.Logger] = None
    ):
        self.session_factory = session_factory
        self.match_repository = match_repository
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def _parse_kind(kind: Union[EventKind, str]) -> EventKind:
        try:
            return EventKind(kind)
        except ValueError:
            raise ValidationError(f"Unknown event kind: {kind}") from None

    def register_event(
        self,
        match_id: int,
        kind: Union[EventKind, str],
        team: str,
        player: str,
        minute: str
    ) -> MatchEvent:
        """
        Validate and append one event to the collection selected by kind.

        Order of checks: required fields, minute format, match exists,
        team belongs to the match. The existence check and the insert are
        separate units of work, so a match deleted in between leaves an
        orphaned event.
        """
        kind = self._parse_kind(kind)
        try:
            require_fields(team=team, player=player, minute=minute)
            require_time_format(minute)
        except ValidationError as e:
            self.logger.warning(f"Rejected {kind.label} for match {match_id}: {e}")
            raise

        match = self.match_repository.get_match_record(match_id)
        if not match.has_team(team):
            self.logger.warning(
                f"Rejected {kind.label} for match {match_id}: "
                f"'{team}' is neither '{match.home_team}' nor '{match.away_team}'"
            )
            raise ValidationError(MSG_TEAM_NOT_IN_MATCH)

        model = EVENT_MODELS[kind]
        with session_scope(self.session_factory) as session:
            row = model(match_id=match_id, team=team, player=player, minute=minute)
            session.add(row)
            session.flush()
            event = MatchEvent(id=row.id, team=row.team, player=row.player, minute=row.minute)

        self.logger.info(
            f"Registered {kind.label} {event.id} for match {match_id}: "
            f"{player} ({team}) at {minute}"
        )
        return event

    def list_events(self, match_id: int, kind: Union[EventKind, str]) -> List[MatchEvent]:
        kind = self._parse_kind(kind)
        with session_scope(self.session_factory) as session:
            return fetch_events(session, kind, match_id)

    def count_events(
        self,
        kind: Union[EventKind, str],
        match_ids: Optional[Iterable[int]] = None
    ) -> TeamCounts:
        kind = self._parse_kind(kind)
        with session_scope(self.session_factory) as session:
            return count_events(session, kind, match_ids)

# Directory: src/laliga_tracker/infra/repo/match_repo.py
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from laliga_tracker.constants import (
    DEFAULT_EXTRA_TIME,
    MSG_EXTRA_TIME_REQUIRED,
    MSG_MATCH_NOT_FOUND,
)
from laliga_tracker.domain.entities.match import Match, MatchDetails, MatchSummary
from laliga_tracker.domain.errors import NotFound, ValidationError
from laliga_tracker.domain.validation import require_fields, require_time_format
from laliga_tracker.domain.value_objects.event_kind import EventKind
from laliga_tracker.infra.db import SessionFactory, session_scope
from laliga_tracker.infra.models import MatchModel
from laliga_tracker.infra.repo.event_queries import count_events, fetch_events, tally


class MatchRepository:
    """Validated create/read/update/delete of match rows, with event counts derived on read."""
    def __init__(self, session_factory: SessionFactory, logger: Optional[logging.Logger] = None):
        self.session_factory = session_factory
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def _to_domain(row: MatchModel) -> Match:
        return Match(
            id=row.id,
            home_team=row.home_team,
            away_team=row.away_team,
            match_date=row.match_date,
            extra_time=row.extra_time,
        )

    def _get_row(self, session: Session, match_id: int) -> MatchModel:
        row = session.get(MatchModel, match_id)
        if row is None:
            self.logger.warning(f"Match {match_id} not found")
            raise NotFound(MSG_MATCH_NOT_FOUND)
        return row

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list_matches(self) -> List[MatchSummary]:
        """
        Every match, ordered by id, with home/away goal and card counts.
        """
        with session_scope(self.session_factory) as session:
            rows = session.query(MatchModel).order_by(MatchModel.id.asc()).all()
            counts = {kind: count_events(session, kind) for kind in EventKind}
            summaries = [
                MatchSummary(
                    match=self._to_domain(row),
                    home=tally(counts, row.id, row.home_team),
                    away=tally(counts, row.id, row.away_team),
                )
                for row in rows
            ]
        self.logger.info(f"Listed {len(summaries)} matches")
        return summaries

    def get_match(self, match_id: int) -> MatchDetails:
        """One match with its counts and the ordered goal / card lists."""
        with session_scope(self.session_factory) as session:
            match = self._to_domain(self._get_row(session, match_id))
            counts = {kind: count_events(session, kind, [match_id]) for kind in EventKind}
            return MatchDetails(
                match=match,
                home=tally(counts, match_id, match.home_team),
                away=tally(counts, match_id, match.away_team),
                goals=fetch_events(session, EventKind.GOAL, match_id),
                yellow_cards=fetch_events(session, EventKind.YELLOW_CARD, match_id),
                red_cards=fetch_events(session, EventKind.RED_CARD, match_id),
            )

    def get_match_record(self, match_id: int) -> Match:
        """The bare match row, without events. Raises NotFound."""
        with session_scope(self.session_factory) as session:
            return self._to_domain(self._get_row(session, match_id))

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create_match(self, home_team: str, away_team: str, match_date: str) -> Match:
        require_fields(home_team=home_team, away_team=away_team, match_date=match_date)

        with session_scope(self.session_factory) as session:
            row = MatchModel(
                home_team=home_team,
                away_team=away_team,
                match_date=match_date,
                extra_time=DEFAULT_EXTRA_TIME,
            )
            session.add(row)
            # flush to get the id assigned by the store
            session.flush()
            match = self._to_domain(row)

        self.logger.info(f"Created match {match.id}: {home_team} vs {away_team} on {match_date}")
        return match

    def update_match(self, match_id: int, home_team: str, away_team: str, match_date: str) -> Match:
        """
        Overwrite teams and date only. An unknown id is a no-op that still
        echoes the given values back, with extra_time left as None.
        """
        require_fields(home_team=home_team, away_team=away_team, match_date=match_date)

        with session_scope(self.session_factory) as session:
            updated = (
                session.query(MatchModel)
                .filter_by(id=match_id)
                .update(
                    {
                        MatchModel.home_team: home_team,
                        MatchModel.away_team: away_team,
                        MatchModel.match_date: match_date,
                    },
                    synchronize_session=False,
                )
            )
            row = session.get(MatchModel, match_id)
            extra_time = row.extra_time if row is not None else None

        if updated:
            self.logger.info(f"Updated match {match_id}")
        else:
            self.logger.warning(f"Update of match {match_id} matched no rows")

        return Match(
            id=match_id,
            home_team=home_team,
            away_team=away_team,
            match_date=match_date,
            extra_time=extra_time,
        )

    def delete_match(self, match_id: int) -> None:
        """Remove the match row. Its events are kept, and an unknown id is not an error."""
        with session_scope(self.session_factory) as session:
            deleted = session.query(MatchModel).filter_by(id=match_id).delete(synchronize_session=False)

        if deleted:
            self.logger.info(f"Deleted match {match_id}")
        else:
            self.logger.warning(f"Delete of match {match_id} matched no rows")

    def set_extra_time(self, match_id: int, extra_time: str) -> None:
        if not extra_time:
            self.logger.warning(f"Rejected empty extra time for match {match_id}")
            raise ValidationError(MSG_EXTRA_TIME_REQUIRED)

        with session_scope(self.session_factory) as session:
            row = self._get_row(session, match_id)
            try:
                require_time_format(extra_time)
            except ValidationError:
                self.logger.warning(f"Rejected extra time {extra_time!r} for match {match_id}")
                raise
            row.extra_time = extra_time

        self.logger.info(f"Set extra time of match {match_id} to {extra_time}")

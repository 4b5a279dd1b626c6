# Directory: src/laliga_tracker/infra/models.py
from sqlalchemy import Column, String, Integer, ForeignKey
from sqlalchemy.orm import declarative_base, declared_attr

from laliga_tracker.constants import DEFAULT_EXTRA_TIME
from laliga_tracker.domain.value_objects.event_kind import EventKind

Base = declarative_base()


class MatchModel(Base):
    __tablename__ = 'matches'
    # ids are never reused after a delete
    __table_args__ = {'sqlite_autoincrement': True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    home_team = Column(String, nullable=False)
    away_team = Column(String, nullable=False)
    match_date = Column(String, nullable=False)
    extra_time = Column(String, nullable=False, default=DEFAULT_EXTRA_TIME,
                        server_default=DEFAULT_EXTRA_TIME)

    def __repr__(self):
        return (f"<MatchModel(id={self.id}, home_team='{self.home_team}', "
                f"away_team='{self.away_team}', match_date='{self.match_date}')>")


class MatchEventMixin:
    """
    Shared columns of the goals / yellow_cards / red_cards tables.
    Rows reference a match but are not cascaded when the match is deleted.
    """
    __table_args__ = {'sqlite_autoincrement': True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    team = Column(String, nullable=False)
    player = Column(String, nullable=False)
    minute = Column(String, nullable=False)

    @declared_attr
    def match_id(cls):
        return Column(Integer, ForeignKey('matches.id'), nullable=False, index=True)

    def __repr__(self):
        return (f"<{type(self).__name__}(id={self.id}, match_id={self.match_id}, "
                f"team='{self.team}', player='{self.player}', minute='{self.minute}')>")


class GoalModel(MatchEventMixin, Base):
    __tablename__ = 'goals'


class YellowCardModel(MatchEventMixin, Base):
    __tablename__ = 'yellow_cards'


class RedCardModel(MatchEventMixin, Base):
    __tablename__ = 'red_cards'


EVENT_MODELS = {
    EventKind.GOAL: GoalModel,
    EventKind.YELLOW_CARD: YellowCardModel,
    EventKind.RED_CARD: RedCardModel,
}

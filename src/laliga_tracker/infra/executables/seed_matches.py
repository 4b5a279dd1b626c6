#!/usr/bin/env python3
import argparse
import logging
from typing import List, Optional

from laliga_tracker.config.logging import setup_logging
from laliga_tracker.config.settings import AppConfig
from laliga_tracker.domain.entities.match import Match
from laliga_tracker.infra.db import Database
from laliga_tracker.infra.repo.match_repo import MatchRepository

logger = logging.getLogger(__name__)

# (home, away, date, extra time)
DEMO_MATCHES = [
    ("Real Madrid", "Barcelona", "2025-05-10", "05:00"),
    ("Atletico Madrid", "Valencia", "2025-06-01", "02:30"),
    ("Sevilla", "Villarreal", "2025-06-15", "00:00"),
    ("Boca Juniors", "River Plate", "2025-07-20", "07:45"),
]


def seed_matches(repo: MatchRepository, skip_if_populated: bool = True) -> List[Match]:
    """
    Insert the demo matches. Returns the created matches, or an empty list
    when the table already has rows and skip_if_populated is set.
    """
    if skip_if_populated and repo.list_matches():
        logger.info("Matches table is not empty, skipping seed")
        return []

    created = []
    for home_team, away_team, match_date, extra_time in DEMO_MATCHES:
        match = repo.create_match(home_team, away_team, match_date)
        if extra_time != match.extra_time:
            repo.set_extra_time(match.id, extra_time)
            match.extra_time = extra_time
        created.append(match)

    logger.info(f"Seeded {len(created)} matches")
    return created


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description='Insert demo matches into the tracker database')
    parser.add_argument('--database-url', help='SQLAlchemy URL (default: LALIGA_DATABASE_URL or the local SQLite file)')
    parser.add_argument('--force', action='store_true', help='Seed even if matches already exist')
    args = parser.parse_args(argv)

    config = AppConfig.from_env()
    setup_logging(config.log_level, logs_dir=None)

    database_url = args.database_url or config.database_url
    AppConfig(database_url=database_url, logs_dir=None).ensure_directories_exist()

    database = Database(database_url)
    try:
        database.init_db()
        seed_matches(MatchRepository(database.session_factory), skip_if_populated=not args.force)
    finally:
        database.dispose()


if __name__ == "__main__":
    main()

from laliga_tracker.infra.executables.seed_matches import DEMO_MATCHES, main, seed_matches
from laliga_tracker.infra.db import Database
from laliga_tracker.infra.repo.match_repo import MatchRepository


def test_seed_inserts_demo_matches(match_repo):
    created = seed_matches(match_repo)

    assert len(created) == len(DEMO_MATCHES)
    stored = [s.match for s in match_repo.list_matches()]
    assert [(m.home_team, m.away_team, m.match_date, m.extra_time) for m in stored] == DEMO_MATCHES


def test_seed_skips_populated_table(match_repo, clasico):
    assert seed_matches(match_repo) == []
    assert len(match_repo.list_matches()) == 1


def test_seed_force(match_repo, clasico):
    seed_matches(match_repo, skip_if_populated=False)
    assert len(match_repo.list_matches()) == 1 + len(DEMO_MATCHES)


def test_main_seeds_sqlite_file(tmp_path, monkeypatch):
    monkeypatch.delenv("LALIGA_DATABASE_URL", raising=False)
    # keep pytest's log capture handlers on the root logger
    monkeypatch.setattr(
        "laliga_tracker.infra.executables.seed_matches.setup_logging",
        lambda *args, **kwargs: None,
    )
    url = f"sqlite:///{tmp_path / 'database' / 'matches.db'}"

    main(["--database-url", url])

    database = Database(url)
    try:
        assert len(MatchRepository(database.session_factory).list_matches()) == len(DEMO_MATCHES)
    finally:
        database.dispose()

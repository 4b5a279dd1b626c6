import pytest

from laliga_tracker.domain.errors import NotFound, StorageError, ValidationError
from laliga_tracker.domain.value_objects.event_kind import EventKind
from laliga_tracker.infra.repo.event_ledger import EventLedger


def test_register_goal_scenario(match_repo, ledger):
    match = match_repo.create_match("Real Madrid", "Barcelona", "2025-05-10")
    assert match.id == 1

    event = ledger.register_event(1, EventKind.GOAL, "Real Madrid", "Vinicius Jr.", "12:34")
    assert event.id is not None

    details = match_repo.get_match(1)
    assert details.home.goals == 1
    assert [(g.team, g.player, g.minute) for g in details.goals] == [
        ("Real Madrid", "Vinicius Jr.", "12:34")
    ]


def test_goal_counts_per_team(match_repo, ledger, clasico):
    ledger.register_event(clasico.id, EventKind.GOAL, "Real Madrid", "Mbappe", "10:00")
    ledger.register_event(clasico.id, EventKind.GOAL, "Barcelona", "Yamal", "25:41")
    ledger.register_event(clasico.id, EventKind.GOAL, "Real Madrid", "Bellingham", "88:03")

    details = match_repo.get_match(clasico.id)

    assert details.home.goals == 2
    assert details.away.goals == 1
    assert [(g.team, g.player, g.minute) for g in details.goals] == [
        ("Real Madrid", "Mbappe", "10:00"),
        ("Barcelona", "Yamal", "25:41"),
        ("Real Madrid", "Bellingham", "88:03"),
    ]


def test_cards_go_to_their_own_collections(match_repo, ledger, clasico):
    ledger.register_event(clasico.id, EventKind.YELLOW_CARD, "Barcelona", "Gavi", "15:00")
    ledger.register_event(clasico.id, EventKind.YELLOW_CARD, "Barcelona", "Araujo", "51:12")
    ledger.register_event(clasico.id, "red_cards", "Real Madrid", "Rudiger", "77:45")

    details = match_repo.get_match(clasico.id)

    assert details.goals == []
    assert [c.player for c in details.yellow_cards] == ["Gavi", "Araujo"]
    assert [c.player for c in details.red_cards] == ["Rudiger"]
    assert (details.away.yellow_cards, details.home.yellow_cards) == (2, 0)
    assert (details.home.red_cards, details.away.red_cards) == (1, 0)


def test_event_ids_are_scoped_per_kind(ledger, clasico):
    goal = ledger.register_event(clasico.id, EventKind.GOAL, "Real Madrid", "Mbappe", "10:00")
    card = ledger.register_event(clasico.id, EventKind.YELLOW_CARD, "Barcelona", "Gavi", "15:00")
    assert goal.id == card.id == 1


def test_counts_are_scoped_to_the_match(match_repo, ledger, clasico):
    rematch = match_repo.create_match("Real Madrid", "Barcelona", "2026-03-01")
    ledger.register_event(clasico.id, EventKind.GOAL, "Real Madrid", "Mbappe", "10:00")

    assert match_repo.get_match(rematch.id).home.goals == 0
    assert ledger.count_events(EventKind.GOAL, [rematch.id]) == {}
    assert ledger.list_events(rematch.id, EventKind.GOAL) == []


def test_team_must_belong_to_the_match(match_repo, ledger, clasico):
    match_repo.create_match("Atletico Madrid", "Valencia", "2025-06-01")

    with pytest.raises(ValidationError):
        ledger.register_event(clasico.id, EventKind.GOAL, "Valencia", "Hugo Duro", "12:00")

    assert ledger.list_events(clasico.id, EventKind.GOAL) == []


def test_team_match_is_case_sensitive(ledger, clasico):
    with pytest.raises(ValidationError):
        ledger.register_event(clasico.id, EventKind.GOAL, "real madrid", "Mbappe", "10:00")


def test_unknown_match_is_not_found(ledger):
    with pytest.raises(NotFound):
        ledger.register_event(9999, EventKind.GOAL, "Real Madrid", "Mbappe", "10:00")


@pytest.mark.parametrize("team, player, minute", [
    ("", "Mbappe", "10:00"),
    ("Real Madrid", "", "10:00"),
    ("Real Madrid", "Mbappe", ""),
    ("Real Madrid", "Mbappe", "10:60"),
    ("Real Madrid", "Mbappe", "100:00"),
])
def test_invalid_payload_rejected_before_lookup(match_repo, ledger, clasico, mocker, team, player, minute):
    lookup = mocker.spy(match_repo, "get_match_record")

    with pytest.raises(ValidationError):
        ledger.register_event(clasico.id, EventKind.GOAL, team, player, minute)

    lookup.assert_not_called()


def test_unknown_kind_rejected(ledger, clasico):
    with pytest.raises(ValidationError):
        ledger.register_event(clasico.id, "penalties", "Real Madrid", "Mbappe", "10:00")


def test_append_failure_is_storage_error(match_repo, clasico, failing_session_factory):
    ledger = EventLedger(failing_session_factory, match_repo)

    with pytest.raises(StorageError):
        ledger.register_event(clasico.id, EventKind.GOAL, "Real Madrid", "Mbappe", "10:00")

    failing_session_factory.return_value.rollback.assert_called_once()

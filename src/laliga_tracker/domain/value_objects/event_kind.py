from enum import Enum


class EventKind(str, Enum):
    """
    The three kinds of match event. The value doubles as the URL segment
    (/api/matches/{id}/goals) and as the JSON key of the event list.
    """
    GOAL = "goals"
    YELLOW_CARD = "yellow_cards"
    RED_CARD = "red_cards"

    @property
    def message(self) -> str:
        return _MESSAGES[self]

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    EventKind.GOAL: "goal",
    EventKind.YELLOW_CARD: "yellow card",
    EventKind.RED_CARD: "red card",
}

_MESSAGES = {
    EventKind.GOAL: "Goal registered successfully",
    EventKind.YELLOW_CARD: "Yellow card registered successfully",
    EventKind.RED_CARD: "Red card registered successfully",
}

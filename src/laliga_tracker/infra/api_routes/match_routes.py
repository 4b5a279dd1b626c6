# Directory: src/laliga_tracker/infra/api_routes/match_routes.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response, status

from laliga_tracker.constants import MAX_MATCH_ID, MIN_MATCH_ID, MSG_EXTRA_TIME_UPDATED
from laliga_tracker.domain.errors import TrackerError
from laliga_tracker.domain.value_objects.event_kind import EventKind
from laliga_tracker.infra.api_routes.schemas import (
    EventPayload,
    EventRegisteredResponse,
    ExtraTimePayload,
    MatchDetailResponse,
    MatchPayload,
    MatchResponse,
    MatchSummaryResponse,
    MessageResponse,
)
from laliga_tracker.infra.repo.event_ledger import EventLedger
from laliga_tracker.infra.repo.match_repo import MatchRepository


router = APIRouter(tags=["matches"])


def get_match_repository(request: Request) -> MatchRepository:
    return request.app.state.match_repository


def get_event_ledger(request: Request) -> EventLedger:
    return request.app.state.event_ledger


def _to_http(e: TrackerError) -> HTTPException:
    return HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/matches", response_model=List[MatchSummaryResponse])
def list_matches(repo: MatchRepository = Depends(get_match_repository)):
    """
    Return every match with home/away goal and card counts.
    """
    try:
        return [MatchSummaryResponse.from_summary(s) for s in repo.list_matches()]
    except TrackerError as e:
        raise _to_http(e) from e


@router.get("/matches/{match_id}", response_model=MatchDetailResponse)
def get_match(
    match_id: int = Path(..., ge=MIN_MATCH_ID, le=MAX_MATCH_ID),
    repo: MatchRepository = Depends(get_match_repository)
):
    """
    Return one match with its counts and the goal / yellow card / red card lists.
    """
    try:
        return MatchDetailResponse.from_details(repo.get_match(match_id))
    except TrackerError as e:
        raise _to_http(e) from e


@router.post("/matches", response_model=MatchResponse)
def create_match(payload: MatchPayload, repo: MatchRepository = Depends(get_match_repository)):
    """
    Create a match. Extra time starts at 00:00.
    """
    try:
        match = repo.create_match(payload.home_team, payload.away_team, payload.match_date)
        return MatchResponse.from_domain(match)
    except TrackerError as e:
        raise _to_http(e) from e


@router.put("/matches/{match_id}", response_model=MatchResponse)
def update_match(
    payload: MatchPayload,
    match_id: int = Path(..., ge=MIN_MATCH_ID, le=MAX_MATCH_ID),
    repo: MatchRepository = Depends(get_match_repository)
):
    """
    Overwrite teams and date. Extra time and events are left as they are;
    use PATCH /matches/{id}/extratime for extra time.
    """
    try:
        match = repo.update_match(match_id, payload.home_team, payload.away_team, payload.match_date)
        return MatchResponse.from_domain(match)
    except TrackerError as e:
        raise _to_http(e) from e


@router.delete("/matches/{match_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_match(
    match_id: int = Path(..., ge=MIN_MATCH_ID, le=MAX_MATCH_ID),
    repo: MatchRepository = Depends(get_match_repository)
):
    try:
        repo.delete_match(match_id)
    except TrackerError as e:
        raise _to_http(e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# NOTE: declared before the {kind} route so "extratime" isn't parsed as an event kind
@router.patch("/matches/{match_id}/extratime", response_model=MessageResponse)
def set_extra_time(
    payload: ExtraTimePayload,
    match_id: int = Path(..., ge=MIN_MATCH_ID, le=MAX_MATCH_ID),
    repo: MatchRepository = Depends(get_match_repository)
):
    """
    Set the extra time of a match, in MM:SS.
    """
    try:
        repo.set_extra_time(match_id, payload.extra_time)
        return MessageResponse(message=MSG_EXTRA_TIME_UPDATED)
    except TrackerError as e:
        raise _to_http(e) from e


@router.patch("/matches/{match_id}/{kind}", response_model=EventRegisteredResponse)
def register_event(
    kind: EventKind,
    payload: EventPayload,
    match_id: int = Path(..., ge=MIN_MATCH_ID, le=MAX_MATCH_ID),
    ledger: EventLedger = Depends(get_event_ledger)
):
    """
    Register a goal, yellow card or red card (kind = goals | yellow_cards | red_cards).
    The team has to be the home or away team of the match.
    """
    try:
        event = ledger.register_event(match_id, kind, payload.team, payload.player, payload.minute)
        return EventRegisteredResponse(message=kind.message, id=event.id)
    except TrackerError as e:
        raise _to_http(e) from e

"""
Training Session Router

Orchestration boundary for the wiring exercise: every endpoint performs one
discrete learner action and returns the recomputed session state.
"""

import logging

from fastapi import APIRouter, Depends, status

from pinapi.dependency import get_session_service
from pinapi.model.enums import ResponseStatus
from pinapi.model.requests import ConnectRequest, CreateSessionRequest
from pinapi.model.responses import BaseResponse, LinesResponse, SessionResponse, ValidationResponse
from pinapi.service.session_service import SessionService

router = APIRouter()

logger = logging.getLogger("SessionRouter")


@router.post(
    "/",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Start a training session",
    description="Create a session with an empty connection set for the chosen sensor",
)
async def create_session(
    request: CreateSessionRequest, service: SessionService = Depends(get_session_service)
) -> SessionResponse:
    session_id, session = service.create_session(request.sensor_name, allow_pin_reuse=request.allow_pin_reuse)
    return SessionResponse.from_session(session_id, session)


@router.get("/{session_id}", response_model=SessionResponse, summary="Get session state")
async def get_session(session_id: str, service: SessionService = Depends(get_session_service)) -> SessionResponse:
    return SessionResponse.from_session(session_id, service.get_session(session_id))


@router.delete("/{session_id}", response_model=BaseResponse, summary="Discard a session")
async def delete_session(session_id: str, service: SessionService = Depends(get_session_service)) -> BaseResponse:
    service.delete_session(session_id)
    return BaseResponse(status=ResponseStatus.SUCCESS, message=f"Session '{session_id}' deleted")


@router.post(
    "/{session_id}/connections",
    response_model=SessionResponse,
    summary="Connect a sensor pin",
    description=(
        "Assign a sensor pin to a microcontroller pin. "
        "Returns 409 without changing the session when the microcontroller pin is already in use."
    ),
)
async def connect(
    session_id: str, request: ConnectRequest, service: SessionService = Depends(get_session_service)
) -> SessionResponse:
    session = service.get_session(session_id)
    session.connect(request.sensor_pin, request.mcu_pin)
    return SessionResponse.from_session(session_id, session)


@router.post(
    "/{session_id}/groups/{group}/toggle",
    response_model=SessionResponse,
    summary="Expand or collapse a group",
    description="Expanding a group collapses any other expanded group",
)
async def toggle_group(
    session_id: str, group: str, service: SessionService = Depends(get_session_service)
) -> SessionResponse:
    session = service.get_session(session_id)
    session.toggle_group(group)
    return SessionResponse.from_session(session_id, session)


@router.get("/{session_id}/validation", response_model=ValidationResponse, summary="Validate connections")
async def validate(session_id: str, service: SessionService = Depends(get_session_service)) -> ValidationResponse:
    session = service.get_session(session_id)
    return ValidationResponse(status=ResponseStatus.SUCCESS, session_id=session_id, validation=session.validate())


@router.get("/{session_id}/lines", response_model=LinesResponse, summary="Connector geometry")
async def lines(session_id: str, service: SessionService = Depends(get_session_service)) -> LinesResponse:
    session = service.get_session(session_id)
    return LinesResponse(
        status=ResponseStatus.SUCCESS,
        session_id=session_id,
        expanded_group=session.expanded_group,
        lines=session.line_geometry(),
    )


@router.post("/{session_id}/reset", response_model=SessionResponse, summary="Restart the exercise")
async def reset(session_id: str, service: SessionService = Depends(get_session_service)) -> SessionResponse:
    session = service.get_session(session_id)
    session.reset()
    return SessionResponse.from_session(session_id, session, message="Session reset")

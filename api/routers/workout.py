from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, Field
from typing import List, Optional

from core.config import settings
from core.exceptions import SessionLimitError, SessionNotFoundError, UnknownExerciseError
from models.exercise import Landmark, Pose, SessionStore, WorkoutSession
from models.exercise.instructions import get_exercise_info, get_instructions, list_exercises
from models.exercise.pose import POSE_LANDMARK_COUNT
from utils.serialization import CustomJSONResponse

router = APIRouter()


class LandmarkPayload(BaseModel):
    x: float
    y: float
    z: Optional[float] = None
    visibility: float = Field(1.0, ge=0.0, le=1.0)


class FramePayload(BaseModel):
    # null entries mark landmarks the estimator did not return
    landmarks: Optional[List[Optional[LandmarkPayload]]] = Field(None, max_length=POSE_LANDMARK_COUNT)


class SessionRequest(BaseModel):
    exercise: str


def get_session_store(request: Request) -> SessionStore:
    """Session store attached to the application at startup."""
    return request.app.state.sessions


def _find_session(session_id: str, store: SessionStore) -> WorkoutSession:
    try:
        return store.get(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


def _to_pose(frame: FramePayload) -> Optional[Pose]:
    if frame.landmarks is None:
        return None

    landmarks = [
        Landmark(x=item.x, y=item.y, visibility=item.visibility, z=item.z) if item else None
        for item in frame.landmarks
    ]
    return Pose(landmarks, min_visibility=settings.MIN_LANDMARK_VISIBILITY)


@router.get("/exercises")
async def get_supported_exercises():
    """Get the catalog of exercises that can be tracked."""
    return CustomJSONResponse(content={"supported_exercises": list_exercises()})


@router.get("/exercises/{exercise_id}/instructions")
async def get_exercise_instructions(exercise_id: str):
    """Get setup, execution and tip content for one exercise."""
    try:
        info = get_exercise_info(exercise_id)
        instructions = get_instructions(exercise_id)
    except UnknownExerciseError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return CustomJSONResponse(content={"exercise": info, "instructions": instructions})


@router.post("/sessions", status_code=201)
def create_session(request: SessionRequest, store: SessionStore = Depends(get_session_store)):
    """
    Start a workout session for an exercise.
    Returns the session id to use for frame submissions.
    """
    try:
        session = store.create(request.exercise)
    except UnknownExerciseError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except SessionLimitError as e:
        raise HTTPException(status_code=503, detail=str(e))

    return CustomJSONResponse(content=session.snapshot(), status_code=201)


@router.get("/sessions/{session_id}")
def get_session(session_id: str, store: SessionStore = Depends(get_session_store)):
    """Get the current counters of a session."""
    return CustomJSONResponse(content=_find_session(session_id, store).snapshot())


@router.post("/sessions/{session_id}/frames")
def submit_frame(session_id: str, frame: FramePayload,
                 store: SessionStore = Depends(get_session_store)):
    """
    Classify one pose frame.
    Send frames one at a time, in capture order.
    """
    session = _find_session(session_id, store)
    snapshot = session.process(_to_pose(frame))
    return CustomJSONResponse(content=snapshot)


@router.put("/sessions/{session_id}/exercise")
def change_exercise(session_id: str, request: SessionRequest,
                    store: SessionStore = Depends(get_session_store)):
    """Switch the session to another exercise."""
    session = _find_session(session_id, store)
    try:
        session.select(request.exercise)
    except UnknownExerciseError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return CustomJSONResponse(content=session.snapshot())


@router.post("/sessions/{session_id}/reset")
def reset_session(session_id: str, store: SessionStore = Depends(get_session_store)):
    """Restart the active exercise from zero."""
    session = _find_session(session_id, store)
    session.reset()
    return CustomJSONResponse(content=session.snapshot())


@router.delete("/sessions/{session_id}", status_code=204)
def end_session(session_id: str, store: SessionStore = Depends(get_session_store)):
    """End a session and discard its counters."""
    try:
        store.remove(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

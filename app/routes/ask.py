from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.schemas.ask import AskRequest, AskResponse, ErrorResponse
from app.services.tutor import Tutor, TutorError

router = APIRouter()


def get_tutor(request: Request) -> Tutor:
    return request.app.state.tutor


@router.post(
    "/ask",
    response_model=AskResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
def ask(request: Request, payload: Optional[AskRequest] = None):
    """
    Relay the student's message to the model and return its reply verbatim.
    Sync handler: FastAPI runs it in the threadpool while the upstream call blocks.
    """
    try:
        answer = get_tutor(request).ask(payload.message if payload else None)
    except TutorError as e:
        return JSONResponse(status_code=e.status_code, content={"error": e.detail})

    return AskResponse(answer=answer)

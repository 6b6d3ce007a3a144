"""Chat turn endpoint: one user message in, one assistant reply out."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.auth.current_user import CurrentUser, get_current_user
from app.commands.chat.send_message_command import SendMessageCommand
from app.db import get_db
from app.schemas.chat import ChatRequest, ChatResponse, ErrorResponse

router = APIRouter(
    prefix="/chat",
    tags=["chat"],
    responses={
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)


def get_send_message_command(db: Session = Depends(get_db)) -> SendMessageCommand:
    return SendMessageCommand(db)


@router.post("", response_model=ChatResponse)
def send_message(
    data: ChatRequest,
    current_user: CurrentUser = Depends(get_current_user),
    command: SendMessageCommand = Depends(get_send_message_command),
) -> ChatResponse:
    """Send a message; reward accrual runs in the background."""
    return command.execute(current_user, data)

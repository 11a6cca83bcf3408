from typing import List
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse
from starlette.background import BackgroundTask
from src.api.dependencies.services import get_chat_service
from src.api.models.chat import ConversationMessage
from src.core.services.chat_service import ChatService
from src.utils.errors import AppError
from src.utils.logging import get_logger

logger = get_logger("api")

router = APIRouter()

@router.post("/chat", response_class=StreamingResponse)
async def chat_endpoint(
    conversation: List[ConversationMessage],
    chat_service: ChatService = Depends(get_chat_service)
):
    try:
        stream = await chat_service.open_completion(conversation)
    except AppError as e:
        logger.warning(f"Rejected chat request: {e}")
        raise HTTPException(
            status_code=e.status_code,
            detail=str(e)
        )
    except Exception as e:
        logger.error(f"Error in chat endpoint: {e}")
        raise HTTPException(
            status_code=500,
            detail=str(e)
        )

    # The background close covers bodies that are never iterated
    return StreamingResponse(
        chat_service.relay(stream),
        background=BackgroundTask(chat_service.close_stream, stream)
    )

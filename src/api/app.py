from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from src.api.dependencies.services import build_chat_service
from src.config.settings import settings
from src.core.services.chat_service import ChatService
from src.utils.logging import get_logger
from .routes import chat_router

logger = get_logger("app")

def create_app(chat_service: Optional[ChatService] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Provider clients are built once at startup unless a ready ChatService
    is supplied.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_service = chat_service is None
        app.state.chat_service = build_chat_service() if owns_service else chat_service
        logger.info("Chat service ready")
        
        yield  # Server is running and handling requests
        
        if owns_service:
            await app.state.chat_service.client.close()
            logger.info("Provider clients closed")

    app = FastAPI(
        title=settings.API_TITLE,
        description=settings.API_DESCRIPTION,
        version=settings.API_VERSION,
        lifespan=lifespan
    )
    
    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    # Register routers
    app.include_router(chat_router, prefix="/api")
    
    return app

app = create_app()

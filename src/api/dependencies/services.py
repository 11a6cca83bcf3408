# src/api/dependencies/services.py
from fastapi import Request
from openai import AsyncOpenAI
from pinecone import Pinecone
from src.config.settings import settings
from src.core.services.chat_service import ChatService
from src.core.services.embedding import EmbeddingService
from src.core.services.vector_service import VectorService

def build_chat_service() -> ChatService:
    """Create the provider clients and wire them into a ChatService."""
    openai_client = AsyncOpenAI(api_key=settings.OPENAI_API_KEY, max_retries=0)
    index = Pinecone(api_key=settings.PINECONE_API_KEY).Index(settings.PINECONE_INDEX)

    return ChatService(
        client=openai_client,
        embedding_service=EmbeddingService(openai_client),
        vector_service=VectorService(index)
    )

def get_chat_service(request: Request) -> ChatService:
    return request.app.state.chat_service

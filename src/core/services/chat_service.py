from typing import Any, AsyncIterator, Dict, List, Sequence
from openai import AsyncOpenAI
from src.api.models.chat import ConversationMessage
from src.core.models.chat import RetrievedMatch
from src.core.services.embedding import EmbeddingService
from src.core.services.vector_service import VectorService
from src.config.settings import settings
from src.utils.errors import EmptyConversationError
from src.utils.logging import get_logger

logger = get_logger("chat")

MISSING_FIELD = "undefined"

def _format_field(value: Any) -> str:
    if value is None:
        return MISSING_FIELD
    # Index metadata stores ratings as floats; 5.0 reads as 5
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)

class ChatService:
    def __init__(
        self,
        client: AsyncOpenAI,
        embedding_service: EmbeddingService,
        vector_service: VectorService
    ):
        self.client = client
        self.embedding_service = embedding_service
        self.vector_service = vector_service

    async def retrieve_matches(self, query: str) -> List[RetrievedMatch]:
        query_embedding = await self.embedding_service.get_embedding(query)
        matches = await self.vector_service.query(query_embedding, settings.TOP_K)
        logger.info(f"Retrieved {len(matches)} matches for query of length {len(query)}")
        return matches

    @staticmethod
    def format_matches(matches: Sequence[RetrievedMatch]) -> str:
        """Render retrieved reviews as the context block appended to the question.

        The "Review" line repeats the star rating rather than review text;
        clients depend on the current layout. Absent metadata fields render as
        "undefined" instead of failing the request.
        """
        result = ""
        for match in matches:
            stars = _format_field(match.metadata.stars)
            subject = _format_field(match.metadata.subject)
            result += (
                f"Returned Results:\n"
                f"        Professor: {match.id}\n"
                f"        Review: {stars}\n"
                f"        Subject: {subject}\n"
                f"        Stars: {stars}\n"
                f"        \n\n"
            )
        return result

    @staticmethod
    def build_messages(
        conversation: Sequence[ConversationMessage],
        context: str
    ) -> List[Dict[str, Any]]:
        if not conversation:
            raise EmptyConversationError()

        last_message = conversation[-1]
        messages = [{"role": "system", "content": settings.SYSTEM_PROMPT}]
        messages.extend(message.model_dump() for message in conversation[:-1])
        messages.append({"role": "user", "content": last_message.content + context})
        return messages

    async def open_completion(self, conversation: Sequence[ConversationMessage]) -> Any:
        """Retrieve context for the last message and open a streaming completion."""
        if not conversation:
            raise EmptyConversationError()

        matches = await self.retrieve_matches(conversation[-1].content)
        messages = self.build_messages(conversation, self.format_matches(matches))

        try:
            return await self.client.chat.completions.create(
                messages=messages,
                model=settings.LLM_MODEL,
                stream=True
            )
        except Exception as e:
            logger.error(f"Error opening completion stream: {e}")
            raise

    async def relay(self, stream: Any) -> AsyncIterator[bytes]:
        """Forward each content delta as UTF-8 bytes, closing the upstream stream on exit."""
        fragments = 0
        try:
            async for chunk in stream:
                content = chunk.choices[0].delta.content if chunk.choices else None
                if content:
                    fragments += 1
                    yield content.encode("utf-8")
        except Exception as e:
            logger.error(f"Error in stream generation: {e}")
            raise
        finally:
            await stream.close()
            logger.info(f"Completion stream closed after {fragments} fragments")

    async def close_stream(self, stream: Any) -> None:
        """Close an upstream completion whose body may never have been iterated."""
        await stream.close()

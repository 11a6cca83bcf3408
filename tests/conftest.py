import os
import tempfile
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

# Settings are read at import time
os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")
os.environ.setdefault("PINECONE_API_KEY", "test-pinecone-key")
os.environ.setdefault("LOGS_DIR", tempfile.mkdtemp(prefix="professor-rag-logs-"))


def make_chunk(content):
    """Build an object shaped like an OpenAI ChatCompletionChunk."""
    return SimpleNamespace(choices=[SimpleNamespace(delta=SimpleNamespace(content=content))])


class FakeCompletionStream:
    """Async iterator standing in for openai.AsyncStream."""

    def __init__(self, chunks, error=None):
        self._chunks = list(chunks)
        self._error = error
        self.closed = False

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for chunk in self._chunks:
            yield chunk
        if self._error is not None:
            raise self._error

    async def close(self):
        self.closed = True


def make_match(professor, subject, stars, score=0.9):
    return SimpleNamespace(id=professor, metadata={"subject": subject, "stars": stars}, score=score)


@pytest.fixture
def completion_stream():
    return FakeCompletionStream([make_chunk("Hello"), make_chunk(None), make_chunk(" world")])


@pytest.fixture
def openai_client(completion_stream):
    client = MagicMock()
    client.embeddings.create = AsyncMock(
        return_value=SimpleNamespace(data=[SimpleNamespace(embedding=[0.1, 0.2, 0.3])])
    )
    client.chat.completions.create = AsyncMock(return_value=completion_stream)
    client.close = AsyncMock()
    return client


@pytest.fixture
def pinecone_index():
    index = MagicMock()
    index.query.return_value = SimpleNamespace(matches=[make_match("Dr. Smith", "CS", 5)])
    return index


@pytest.fixture
def chat_service(openai_client, pinecone_index):
    from src.core.services.chat_service import ChatService
    from src.core.services.embedding import EmbeddingService
    from src.core.services.vector_service import VectorService

    return ChatService(
        client=openai_client,
        embedding_service=EmbeddingService(openai_client),
        vector_service=VectorService(pinecone_index)
    )

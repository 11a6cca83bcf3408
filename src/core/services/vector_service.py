import asyncio
from typing import Any, List, Optional
from src.core.models.chat import RetrievedMatch
from src.config.settings import settings
from src.utils.logging import get_logger

logger = get_logger("vector")

class VectorService:
    """Nearest-neighbour lookups against the pre-populated review index.

    The index handle is created once at startup and shared; queries are
    read-only, so concurrent requests never contend on it.
    """

    def __init__(self, index: Any, namespace: str = settings.PINECONE_NAMESPACE):
        self.index = index
        self.namespace = namespace

    async def query(
        self,
        vector: List[float],
        top_k: Optional[int] = None
    ) -> List[RetrievedMatch]:
        top_k = settings.TOP_K if top_k is None else top_k
        try:
            logger.info(f"Querying namespace {self.namespace} with top_k {top_k}")
            # The Pinecone client is synchronous
            response = await asyncio.to_thread(
                self.index.query,
                vector=vector,
                top_k=top_k,
                include_metadata=True,
                namespace=self.namespace
            )
            return [
                RetrievedMatch(
                    id=match.id,
                    metadata=match.metadata or {},
                    score=getattr(match, "score", None)
                )
                for match in response.matches
            ]
        except Exception as e:
            logger.error(f"Error querying vector index: {e}")
            raise

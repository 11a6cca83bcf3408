from typing import List
from openai import AsyncOpenAI
from src.utils.logging import get_logger
from src.config.settings import settings

logger = get_logger("embedding")

class EmbeddingService:
    def __init__(self, client: AsyncOpenAI, model: str = settings.EMBEDDING_MODEL):
        self.client = client
        self.model = model

    async def get_embedding(self, text: str) -> List[float]:
        try:
            response = await self.client.embeddings.create(
                model=self.model,
                input=text,
                encoding_format="float"
            )
            return response.data[0].embedding
        except Exception as e:
            logger.error(f"Error getting embedding: {e}")
            raise

from pathlib import Path
from typing import List
from pydantic_settings import BaseSettings

DEFAULT_SYSTEM_PROMPT = """You are a rate my professor agent to help students find classes, that takes in user questions and answer them.
For every user question, the top 3 professor that matched the user questions are returned. Use them to answer the question if needed."""

class Settings(BaseSettings):
    # API Settings
    API_VERSION: str = "0.0.1"
    API_TITLE: str = "Rate My Professor Assistant API"
    API_DESCRIPTION: str = "Streaming chat API answering questions from professor reviews"
    
    # OpenAI Settings
    OPENAI_API_KEY: str
    LLM_MODEL: str = "gpt-3.5-turbo"
    EMBEDDING_MODEL: str = "text-embedding-3-small"

    # Pinecone Settings
    PINECONE_API_KEY: str
    PINECONE_INDEX: str = "rag"
    PINECONE_NAMESPACE: str = "ns1"
    TOP_K: int = 5
    
    # Security
    CORS_ORIGINS: str = "*"
    
    # Chat Settings
    SYSTEM_PROMPT: str = DEFAULT_SYSTEM_PROMPT
    
    # Logging
    LOG_LEVEL: str = "INFO"
    PROJECT_ROOT: Path = Path(__file__).parent.parent.parent
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    
    @property
    def cors_origins_list(self) -> List[str]:
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [x.strip() for x in self.CORS_ORIGINS.split(',') if x.strip()]
    
    class Config:
        env_file = ".env"

settings = Settings()

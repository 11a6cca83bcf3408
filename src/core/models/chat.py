from pydantic import BaseModel, ConfigDict
from typing import Any, Optional

class ReviewMetadata(BaseModel):
    """Metadata stored alongside each review vector.

    Records come from an external ingestion job, so fields are not
    guaranteed to be present or well typed.
    """
    model_config = ConfigDict(extra="allow")

    subject: Any = None
    stars: Any = None

class RetrievedMatch(BaseModel):
    id: str
    metadata: ReviewMetadata = ReviewMetadata()
    score: Optional[float] = None

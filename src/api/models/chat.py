from pydantic import BaseModel, ConfigDict, Field
from typing import Literal

class ConversationMessage(BaseModel):
    # Extra keys (e.g. "name") are forwarded to the completion request as-is
    model_config = ConfigDict(frozen=True, extra="allow")

    role: Literal["system", "user", "assistant"] = Field(..., description="Author of the message")
    content: str = Field(..., description="Message text")

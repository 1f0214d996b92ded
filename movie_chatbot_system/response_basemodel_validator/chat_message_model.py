""" Chat thread validator using pydantic basemodel"""
from typing import List, Optional
from pydantic import BaseModel, Field


# one message of the thread
class ChatMessage(BaseModel):
    """Message in the conversation, bot or user."""
    # displayed text
    text: str
    # origin flag
    is_bot: bool = Field(default=False)


# incoming chat message
class ChatMessageRequest(BaseModel):
    """Request body for /chat/message."""
    text: str = Field(..., description="User text to answer.")


# remaining quota view
class RateLimitStatus(BaseModel):
    """Remaining requests in the current window, display only."""
    remaining: int
    max_requests: int


# reply to one chat message
class ChatMessageResponse(BaseModel):
    """Response body from /chat/message."""
    # bot reply, None when the input was blank
    reply: Optional[ChatMessage] = None
    # quota after the reply
    rate_limit: RateLimitStatus


# whole thread
class ChatThreadResponse(BaseModel):
    """Response body from /chat/messages."""
    messages: List[ChatMessage] = Field(default_factory=list)
    is_composing: bool = Field(default=False)

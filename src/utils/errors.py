# src/utils/errors.py
class AppError(Exception):
    """Base error class for application exceptions."""
    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code

class EmptyConversationError(AppError):
    """Raised when a chat request carries no messages."""
    def __init__(self, message: str = "Conversation must contain at least one message"):
        super().__init__(message, status_code=400)

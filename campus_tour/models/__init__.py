from .user import User
from .feedback import Feedback

__all__ = ["User", "Feedback"]

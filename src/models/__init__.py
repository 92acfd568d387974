from .base import Base, BaseModel, SerialBase, TimeStamp
from .user import User

__all__ = [
    "Base",
    "BaseModel",
    "SerialBase",
    "TimeStamp",
    "User",
]

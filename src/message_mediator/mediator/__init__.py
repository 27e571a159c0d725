from .base import BaseMediator
from .message_mediator import MessageMediator

__all__ = [
    "BaseMediator",
    "MessageMediator",
]

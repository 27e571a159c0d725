"""
Message Mediator Package.

This package provides an in-memory mediator that brokers messages between
named participants without them referencing each other directly.
"""

from .config import MediatorConfig
from .core import (
    MessageMediatorError,
    UnjoinedParticipantError,
    Message,
    ParticipantProtocol,
    Participant,
    ParticipantId,
    MessageRecord,
    MessageRecords,
)
from .mediator import BaseMediator, MessageMediator
from .demo import run_demo

__version__ = "0.1.0"

__all__ = [
    # Config
    "MediatorConfig",
    # Errors
    "MessageMediatorError",
    "UnjoinedParticipantError",
    # Core types
    "Message",
    "ParticipantProtocol",
    "Participant",
    "ParticipantId",
    "MessageRecord",
    "MessageRecords",
    # Mediator
    "BaseMediator",
    "MessageMediator",
    # Demo
    "run_demo",
]

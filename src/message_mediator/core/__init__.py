from .errors import MessageMediatorError, UnjoinedParticipantError
from .message import Message
from .participant import ParticipantProtocol, Participant
from .types import ParticipantId, MessageRecord, MessageRecords

__all__ = [
    "MessageMediatorError",
    "UnjoinedParticipantError",
    "Message",
    "ParticipantProtocol",
    "Participant",
    "ParticipantId",
    "MessageRecord",
    "MessageRecords",
]

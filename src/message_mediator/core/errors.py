from typing import Optional

from .types import ParticipantId


class MessageMediatorError(Exception):
    """Base class for errors raised by the message_mediator package."""


class UnjoinedParticipantError(MessageMediatorError):
    """Raised when a participant communicates before joining a mediator."""

    def __init__(self, participant_id: ParticipantId, action: Optional[str] = None):
        self.participant_id = participant_id
        self.action = action
        verb = action or "communicate"
        super().__init__(
            f"Participant '{participant_id}' must join a mediator before it can {verb}"
        )

from abc import ABC, abstractmethod
from typing import List

from ..config import MediatorConfig
from ..core.message import Message
from ..core.participant import ParticipantProtocol
from ..core.types import ParticipantId


class BaseMediator(ABC):
    """Abstract base class for message mediators."""

    config: MediatorConfig

    @abstractmethod
    def join(self, participant: ParticipantProtocol) -> ParticipantProtocol:
        """
        Register a participant and point it at this mediator.

        Args:
            participant: Participant to register under its id

        Returns:
            The same participant
        """
        pass

    @abstractmethod
    def store(
        self,
        body: str,
        sender: ParticipantProtocol,
        recipient: ParticipantProtocol,
    ) -> Message:
        """
        Append a message from sender to recipient to the log.

        Returns:
            The stored Message
        """
        pass

    @abstractmethod
    def retrieve_all(self, participant_id: ParticipantId) -> List[Message]:
        """
        Messages addressed to participant_id, in send order.

        Returns:
            List of messages, empty when none match
        """
        pass

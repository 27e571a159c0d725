import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, List, Optional, Protocol, runtime_checkable

from .errors import MessageMediatorError, UnjoinedParticipantError
from .message import Message
from .types import ParticipantId

if TYPE_CHECKING:
    from ..mediator.base import BaseMediator

logger = logging.getLogger(__name__)


@runtime_checkable
class ParticipantProtocol(Protocol):
    """
    Protocol for anything a mediator can register and route messages for.

    A mediator reads ``id`` and ``mediator`` and calls ``bind`` once on
    join; any object exposing these can take part in a conversation.
    """

    @property
    def id(self) -> ParticipantId:
        """Unique participant name within one mediator."""
        ...

    @property
    def mediator(self) -> Optional["BaseMediator"]:
        """Mediator this participant joined, or None."""
        ...

    def bind(self, mediator: "BaseMediator") -> None:
        ...


@dataclass(eq=False)
class Participant:
    """
    User-facing handle that talks to others only through its mediator.

    The mediator reference is set once by ``BaseMediator.join`` and cannot
    be reassigned afterwards.
    """

    id: ParticipantId
    output: Callable[[str], None] = field(default=print, repr=False)
    _mediator: Optional["BaseMediator"] = field(default=None, init=False, repr=False)

    @property
    def username(self) -> ParticipantId:
        """Alias for id."""
        return self.id

    @property
    def mediator(self) -> Optional["BaseMediator"]:
        return self._mediator

    @property
    def is_joined(self) -> bool:
        return self._mediator is not None

    def bind(self, mediator: "BaseMediator") -> None:
        """
        Attach this participant to a mediator.

        Binding again to the same mediator is a no-op.

        Raises:
            MessageMediatorError: if already bound to a different mediator
        """
        if self._mediator is not None and self._mediator is not mediator:
            raise MessageMediatorError(
                f"Participant '{self.id}' has already joined another mediator"
            )
        self._mediator = mediator

    def _require_mediator(self, action: str) -> "BaseMediator":
        if self._mediator is None:
            raise UnjoinedParticipantError(self.id, action)
        return self._mediator

    def send(self, body: str, to: ParticipantProtocol) -> Message:
        """
        Send a message to another participant via the mediator.

        Args:
            body: Message text
            to: Recipient participant (need not be joined)

        Returns:
            The stored Message

        Raises:
            UnjoinedParticipantError: if this participant has not joined a mediator
        """
        mediator = self._require_mediator("send")
        return mediator.store(body, self, to)

    def retrieve_all(self) -> List[Message]:
        """Messages addressed to this participant, in send order."""
        mediator = self._require_mediator("retrieve messages")
        return mediator.retrieve_all(self.id)

    def show_all(self) -> List[str]:
        """
        Write every incoming message to ``output``, one line each.

        When there are no messages the mediator's empty notice is written
        instead.

        Returns:
            Rendered lines, empty when there are no messages
        """
        mediator = self._require_mediator("retrieve messages")
        lines = [m.render() for m in mediator.retrieve_all(self.id)]

        if lines:
            for line in lines:
                self.output(line)
        else:
            logger.debug("No messages for %s", self.id)
            self.output(mediator.config.empty_notice)
        return lines

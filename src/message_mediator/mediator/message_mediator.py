"""
In-memory message mediator.

Participants never hold references to each other. Every message goes
through a MessageMediator, which keeps a registry of participants keyed by
id and an append-only log of messages in send order.
"""

import json
import logging
import threading
from contextlib import nullcontext
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

import pandas as pd

from .base import BaseMediator
from ..config import MediatorConfig
from ..core.message import Message
from ..core.participant import ParticipantProtocol
from ..core.types import ParticipantId, MessageRecords

logger = logging.getLogger(__name__)

RECORD_COLUMNS = ["from", "to", "message"]

# Default for dump_json: use the configured indent.
_CONFIG_INDENT: Any = object()


class MessageMediator(BaseMediator):
    """
    Broker that stores and routes messages between joined participants.

    Joining an id that is already registered replaces the earlier
    participant. A participant already bound to another mediator is left
    where it is. Messages to ids that never joined are stored anyway and
    simply have no one to retrieve them.
    """

    def __init__(self, config: Optional[MediatorConfig] = None):
        self.config = config if config is not None else MediatorConfig()
        self._participants: Dict[ParticipantId, ParticipantProtocol] = {}
        self._messages: List[Message] = []
        self._lock = threading.RLock() if self.config.thread_safe else nullcontext()

    def join(self, participant: ParticipantProtocol) -> ParticipantProtocol:
        current = participant.mediator
        if current is not None and current is not self:
            logger.warning(
                "Participant '%s' already joined another mediator; join ignored",
                participant.id,
            )
            return participant

        with self._lock:
            previous = self._participants.get(participant.id)
            if previous is not None and previous is not participant:
                logger.warning(
                    "Participant id '%s' re-joined; replacing earlier registration",
                    participant.id,
                )
            participant.bind(self)
            self._participants[participant.id] = participant
        logger.debug("Participant '%s' joined", participant.id)
        return participant

    def store(
        self,
        body: str,
        sender: ParticipantProtocol,
        recipient: ParticipantProtocol,
    ) -> Message:
        message = Message(sender=sender.id, recipient=recipient.id, body=body)
        with self._lock:
            if recipient.id not in self._participants:
                logger.info(
                    "Storing message for '%s', which has not joined this mediator",
                    recipient.id,
                )
            self._messages.append(message)
        logger.debug("Stored message %s", message.render())
        return message

    def retrieve_all(self, participant_id: ParticipantId) -> List[Message]:
        with self._lock:
            found = [m for m in self._messages if m.recipient == participant_id]
        logger.debug("Retrieved %d message(s) for '%s'", len(found), participant_id)
        return found

    @property
    def participants(self) -> Mapping[ParticipantId, ParticipantProtocol]:
        """Read-only snapshot of the registry."""
        with self._lock:
            return MappingProxyType(dict(self._participants))

    @property
    def messages(self) -> Tuple[Message, ...]:
        """Snapshot of the log in send order."""
        with self._lock:
            return tuple(self._messages)

    def get_participant(self, participant_id: ParticipantId) -> Optional[ParticipantProtocol]:
        """Participant registered under participant_id, or None."""
        with self._lock:
            return self._participants.get(participant_id)

    def is_joined(self, participant_id: ParticipantId) -> bool:
        """Whether any participant is registered under participant_id."""
        with self._lock:
            return participant_id in self._participants

    def __contains__(self, participant_id: object) -> bool:
        with self._lock:
            return participant_id in self._participants

    def __len__(self) -> int:
        """Number of stored messages."""
        with self._lock:
            return len(self._messages)

    def to_records(self) -> MessageRecords:
        """Full log as ``{from, to, message}`` records in send order."""
        return [m.to_record() for m in self.messages]

    def dump_json(self, indent: Optional[int] = _CONFIG_INDENT) -> str:
        """
        Serialize the full log to JSON.

        Args:
            indent: JSON indent; defaults to ``config.json_indent``.
                    None produces compact output.

        Returns:
            JSON array of ``{from, to, message}`` objects
        """
        if indent is _CONFIG_INDENT:
            indent = self.config.json_indent
        return json.dumps(self.to_records(), indent=indent)

    def to_dataframe(self) -> pd.DataFrame:
        """Full log as a DataFrame with columns from, to, message."""
        return pd.DataFrame(self.to_records(), columns=RECORD_COLUMNS)

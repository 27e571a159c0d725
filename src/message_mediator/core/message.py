from dataclasses import dataclass

from .types import ParticipantId, MessageRecord


@dataclass(frozen=True)
class Message:
    """
    A single message exchanged through a mediator.

    Messages are immutable once created. The body is exposed as ``body`` on
    the object and serialized under the ``message`` key in records.
    """

    sender: ParticipantId
    recipient: ParticipantId
    body: str

    def render(self) -> str:
        """Human-readable form: ``<from> -> <to>: <body>``."""
        return f"{self.sender} -> {self.recipient}: {self.body}"

    def to_record(self) -> MessageRecord:
        return {"from": self.sender, "to": self.recipient, "message": self.body}

    @classmethod
    def from_record(cls, record: MessageRecord) -> "Message":
        """
        Create a Message from a ``{from, to, message}`` record.

        Args:
            record: Mapping with ``from``, ``to`` and ``message`` keys

        Returns:
            Message instance
        """
        return cls(
            sender=record["from"],
            recipient=record["to"],
            body=record["message"],
        )

    def __str__(self) -> str:
        return self.render()

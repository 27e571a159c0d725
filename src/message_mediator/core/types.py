from typing import List, TypedDict

ParticipantId = str

# "from" is a keyword, so the record type uses the functional syntax.
MessageRecord = TypedDict(
    "MessageRecord",
    {"from": ParticipantId, "to": ParticipantId, "message": str},
)

MessageRecords = List[MessageRecord]

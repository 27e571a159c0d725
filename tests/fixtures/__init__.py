from .conversation import (
    CONVERSATION_PARTICIPANTS,
    CONVERSATION_SENDS,
    CONVERSATION_GEORGE_LINES,
    CONVERSATION_RECORDS,
)

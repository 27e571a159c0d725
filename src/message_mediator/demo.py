"""
Console walkthrough of the mediator: three participants, three messages.
"""

from typing import Callable, Optional

from .core.participant import Participant
from .mediator.message_mediator import MessageMediator


def run_demo(
    mediator: Optional[MessageMediator] = None,
    output: Callable[[str], None] = print,
) -> MessageMediator:
    """
    Run the john/george/oscar conversation and print the results.

    Args:
        mediator: Mediator to use; a fresh one is created when omitted
        output: Line writer used for all console output

    Returns:
        The mediator holding the conversation
    """
    if mediator is None:
        mediator = MessageMediator()

    john = Participant("john", output=output)
    george = Participant("george", output=output)
    oscar = Participant("oscar", output=output)

    for participant in (john, george, oscar):
        mediator.join(participant)

    john.send("text message", george)
    john.send("another text message", george)
    oscar.send("another text message", john)

    george.show_all()
    oscar.show_all()

    output(mediator.dump_json())
    return mediator

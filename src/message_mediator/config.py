from dataclasses import dataclass
from typing import Optional


@dataclass
class MediatorConfig:
    """Configuration for a message mediator."""

    empty_notice: str = "no messages!"
    json_indent: Optional[int] = 3
    thread_safe: bool = False

    def __post_init__(self):
        if not self.empty_notice:
            raise ValueError("empty_notice must be a non-empty string")
        if self.json_indent is not None and self.json_indent < 0:
            raise ValueError("json_indent must be >= 0 or None")

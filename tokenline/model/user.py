"""Domain models for queue participants and channels."""

from dataclasses import dataclass, field
from typing import NamedTuple


@dataclass(frozen=True)
class User:
    """A participant in a token queue.

    Equality and hashing consider only ``user_id``; the display name may
    change between requests without affecting queue membership.

    Attributes:
        user_id: Stable platform identifier (e.g., "U024BE7LH").
        user_name: Human-readable display name.
    """

    user_id: str
    user_name: str = field(compare=False)

    @property
    def mention(self) -> str:
        """Slack mention markup, e.g. ``<@U024BE7LH|bob>``."""
        return f"<@{self.user_id}|{self.user_name}>"

    def __str__(self) -> str:
        return self.user_name


class ChannelKey(NamedTuple):
    """Identifies exactly one queue: a channel within a team."""

    team_id: str
    channel_id: str

    def __str__(self) -> str:
        return f"{self.team_id}:{self.channel_id}"

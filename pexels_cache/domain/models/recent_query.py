"""RecentQuery Domain Model"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RecentQuery:
    """A normalized search term and when it was last used (epoch ms)"""

    query: str
    last_used_at: int

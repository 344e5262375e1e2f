"""Duplicate relationship status."""

from enum import StrEnum


class DuplicateStatus(StrEnum):
    """Lifecycle status of a duplicate relationship.

    ``exact`` and ``similar`` are set by detection. ``reviewed`` and
    ``dismissed`` are terminal and set by a user.
    """

    EXACT = "exact"
    SIMILAR = "similar"
    REVIEWED = "reviewed"
    DISMISSED = "dismissed"

    @property
    def is_initial(self) -> bool:
        return self in (DuplicateStatus.EXACT, DuplicateStatus.SIMILAR)

    @property
    def is_terminal(self) -> bool:
        return not self.is_initial

    def can_transition_to(self, other: "DuplicateStatus") -> bool:
        return self.is_initial and other.is_terminal

"""Deployment gate aggregate and its value types.

Pure domain objects: no storage, no transport, no clock reads.
Timestamps are always supplied by the caller.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from types import MappingProxyType

import structlog

from deploy_gates.core.exceptions import CommentConflictError

logger = structlog.get_logger(__name__)


class GateState(StrEnum):
    """Approval state of a gate. Transitions are owned by the approval workflow."""

    OPEN = "Open"
    CLOSED = "Closed"


@dataclass(frozen=True)
class GateKey:
    """Identity of a gate: one (group, service, environment) triple."""

    group: str
    service: str
    environment: str


@dataclass(frozen=True)
class Comment:
    """Immutable audit note attached to a gate."""

    id: str
    message: str
    created: datetime


@dataclass(eq=False)
class Gate:
    """Approval switch for a single group/service/environment.

    Comments are stored keyed by id and are append-only. ``last_updated``
    only ever moves forward through the mutation methods below.
    """

    key: GateKey
    state: GateState
    last_updated: datetime
    display_order: int | None = None
    _comments: dict[str, Comment] = field(default_factory=dict, init=False, repr=False)

    @classmethod
    def create(
        cls,
        key: GateKey,
        state: GateState,
        last_updated: datetime,
        comments: list[Comment] | None = None,
        display_order: int | None = None,
    ) -> "Gate":
        """Build a gate and load its existing comment history.

        ``last_updated`` is taken as given; loaded comments do not move it.
        """
        gate = cls(key=key, state=state, last_updated=last_updated, display_order=display_order)
        for comment in comments or []:
            gate._insert(comment)
        return gate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Gate):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    @property
    def comments(self) -> Mapping[str, Comment]:
        return MappingProxyType(self._comments)

    @property
    def comment_count(self) -> int:
        return len(self._comments)

    def add_comment(self, comment: Comment) -> bool:
        """Append a comment to the gate's history.

        Args:
            comment: The comment to store

        Returns:
            True if the comment was stored, False if an identical comment
            was already present (repeated delivery is a no-op)

        Raises:
            CommentConflictError: the id is already used by a different comment
        """
        if not self._insert(comment):
            return False
        self._advance(comment.created)
        return True

    def set_state(self, state: GateState, at: datetime) -> None:
        """Store a new state tag decided by the approval workflow."""
        self.state = state
        self._advance(at)

    def _insert(self, comment: Comment) -> bool:
        existing = self._comments.get(comment.id)
        if existing is None:
            self._comments[comment.id] = comment
            return True
        if existing == comment:
            logger.debug("comment_already_present", gate=self._log_key(), comment_id=comment.id)
            return False
        logger.warning("comment_id_conflict", gate=self._log_key(), comment_id=comment.id)
        raise CommentConflictError(self.key, comment.id)

    def _advance(self, at: datetime) -> None:
        if at > self.last_updated:
            self.last_updated = at

    def _log_key(self) -> str:
        return f"{self.key.group}/{self.key.service}/{self.key.environment}"

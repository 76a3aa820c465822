"""Partial delivery failure of an aggregate's domain events.

Raised (as a Failure value) by the dispatch step after the aggregate has
already been persisted. The persisted state is NOT rolled back: callers get
an exact account of which domain events reached the bus and which did not,
and may republish the undelivered ones.
"""

from dataclasses import dataclass, field
from uuid import UUID

from src.core.errors.domain_error import DomainError
from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, slots=True, kw_only=True)
class EventDispatchError(DomainError):
    """Domain event dispatch stopped at the first failed delivery.

    Attributes:
        code: ErrorCode.TRANSPORT_ERROR.
        message: Human-readable message.
        aggregate_id: Aggregate whose events were being dispatched.
        delivered: Events accepted by the bus before the failure, in order.
        undelivered: The failed event followed by every event after it.
        cause: Error reported by the publisher for the failed event.
        details: Additional context.
    """

    aggregate_id: UUID
    delivered: tuple[DomainEvent, ...] = field(default_factory=tuple)
    undelivered: tuple[DomainEvent, ...] = field(default_factory=tuple)
    cause: DomainError | None = None

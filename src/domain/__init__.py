"""Domain layer - Pure business logic.

This layer contains the Event aggregate, its value objects, protocols
(ports), and domain events. The domain layer has NO dependencies on any
framework or infrastructure - it is pure Python.

Structure:
- entities/: Event aggregate root and Section entity
- value_objects/: EventDate, EventDuration, Price, EventState
- enums/: EventStatus lifecycle tokens
- errors/: Construction-time argument errors and message constants
- protocols/: Repository, publisher, transport and logger ports
- events/: Domain events (EventCreated, EventPublished)

The domain layer defines WHAT the business does, not HOW it's implemented.
"""

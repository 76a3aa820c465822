"""Application layer - Use cases and orchestration.

This layer contains the application's use cases following the CQRS pattern:
- Commands: Write operations that change Event state
- Queries: Read operations that fetch Event data

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- validators/: Declarative command rule sets
- events/: Publish-and-clear step for pending domain events
- errors/: Application-level error types

The application layer orchestrates domain logic but contains no business rules.
"""

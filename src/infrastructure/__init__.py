"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- Event repository (in-memory)
- Message bus publisher and transports (RabbitMQ, in-memory)
- Structured logging (structlog)

Structure:
- persistence/: Repository adapters
- messaging/: Domain event codec, publisher and broker transports
- logging/: Logger adapters
- errors/, enums/: Infrastructure error types and codes

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""

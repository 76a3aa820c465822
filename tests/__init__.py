"""Test suite for the events service.

Test structure follows the test pyramid:
- unit/: Unit tests - domain logic, handlers and adapters in isolation
- integration/: Integration tests - full command flows over in-memory adapters
"""

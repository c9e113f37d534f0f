"""Domain layer - Pure business logic.

Entities, value objects, protocols (ports), validators and domain errors.
The domain layer has NO dependencies on frameworks or infrastructure.

Structure:
- entities/: Domain entities (mutable, have identity)
- value_objects/: Value objects (immutable, no identity)
- protocols/: Ports implemented by infrastructure adapters
- validators/ + types.py: Reusable input validation
- errors/: Domain-specific error types
"""

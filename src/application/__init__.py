"""Application layer - Use cases and orchestration.

Follows the CQRS split:
- commands/: Command dataclasses and handlers (register, login, refresh,
  update, delete)
- queries/: Query dataclasses and handlers (get user, list users)
- dtos/: Result objects handed back to the presentation layer
- services/: Shared orchestration helpers (token pair issuance, guarded
  store calls)

The application layer orchestrates domain logic but contains no business rules.
"""

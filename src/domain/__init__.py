"""Domain layer - Pure business logic.

This layer contains the vehicle entity, value objects, enums and protocols
(ports). The domain layer has NO dependencies on any framework or
infrastructure - it is pure Python.

Structure:
- entities/: Domain entities (mutable, have identity)
- value_objects/: Value objects (immutable, no identity)
- enums/: Domain enumerations
- protocols/: Repository, service and logger interfaces

The domain layer defines WHAT the business does, not HOW it's implemented.
"""

"""Application layer - Use cases and orchestration.

Structure:
- services/: VehicleService facade consumed by the HTTP layer
- errors/: ApplicationError wrapping domain errors for the presentation layer

The application layer orchestrates domain logic but contains no business rules.
"""

"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- persistence/: Vehicle store (in-memory repository)
- loaders/: Startup data loaders (JSON file)
- logging/: Structured logging adapters (structlog)
"""

"""Entrypoints layer - Wiring for whatever triggers order placement.

This layer contains:
- Container: Composition root that builds the collaborator and the facade

HTTP handlers, CLI commands and the like are expected to obtain the
OrderFacade from here rather than construct it themselves.
"""

"""Domain layer - Core business rules and exceptions.

This layer contains:
- Domain Exceptions: Business rule violations and collaborator failures

The domain layer has NO dependencies on external frameworks or infrastructure.
"""

"""
Pydantic schema definitions for API payloads.

Schemas are separated from the repository record types to decouple
the API representation from persistence.
"""

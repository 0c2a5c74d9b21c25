"""
Pydantic schema definitions for API payloads.

Schemas are separated from the service's internal records to decouple
the API representation from storage.
"""

"""
API Schemas - Pydantic models for response documentation

These schemas define the contract between the API and clients.
Separate from the internal dataclasses used by the aggregation code.
"""

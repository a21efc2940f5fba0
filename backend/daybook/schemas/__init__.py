"""Pydantic Schemas — request/response contracts for the HTTP API.

Invariants:
    - Schemas validate at the system boundary; domain rules stay in services
    - Response models built from ORM rows via from_attributes
"""

"""
Pydantic models shared across the API.

- io/: request and response schemas that define the JSON contract
"""

"""API Schemas — Pydantic response models and JSON schema documents for request bodies.

Invariants:
    - Request bodies are checked by the JSON documents in schemas/json/ (request gate)
    - Response models use the API's camelCase field names
"""

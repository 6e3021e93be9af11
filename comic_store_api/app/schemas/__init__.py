"""
Pydantic schemas for request and response bodies.

Each resource has a ``*Create`` schema for new records, a ``*Update``
schema whose fields are all optional and a ``*Read`` schema returned
by the API.
"""

"""
Service layer.

Services hold the business rules for each resource.  They run the
validation pass, call the repositories inside a transaction and return
pydantic schemas to the endpoints.
"""

"""
Services module for business logic separation.

LinkService sits between the API endpoints and the LinkStore and owns the
translation of store errors into domain errors.
"""

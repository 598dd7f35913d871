"""
Application layer: DTOs, payload validation, reference checking and the
use cases invoked by the API controllers.
"""

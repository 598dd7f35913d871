"""
Domain layer: catalog entities, field name constants and repository contracts.
"""

"""
API layer for the Device Catalog.

Exposes the HTTP endpoints for device types, device models and devices,
plus the welcome route.
"""

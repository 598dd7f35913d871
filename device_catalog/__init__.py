"""
Device Catalog Service: root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain entities, the payload validator and reference checker, and the
in-memory entity store for device types, device models and devices.
"""

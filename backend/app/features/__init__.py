"""
Feature modules for the triathlon normalizer.

Each feature is a self-contained module with:
- models.py - Dataclasses (no DB dependency)
- schemas.py - Pydantic schemas
- normalizer.py / service.py - Business logic
"""

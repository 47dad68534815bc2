"""
Core business logic for the coaster service.

This module is framework-agnostic - it doesn't import FastAPI, SQLAlchemy,
or any infrastructure concerns. Stores are reached only through the
``CoasterStore`` protocol, so the service can be tested with any backend.
"""

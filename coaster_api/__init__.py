"""
Coaster API - a small REST service for roller coaster records.

This package contains the complete application:
- core: Framework-agnostic resource logic
- infrastructure: Store backends (in-memory, SQL)
- api: FastAPI routes and dependencies
- config: Application configuration
"""

__version__ = "0.1.0"

"""
Infrastructure layer - storage backends.

- store.memory: process-local dict guarded by a readers-writer lock
- store.sql: relational database through SQLAlchemy

Both implement the ``CoasterStore`` protocol from the core package.
"""

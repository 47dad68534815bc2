"""
API layer - FastAPI routes and dependencies.

Routes translate HTTP into service calls; they hold no business rules.
"""

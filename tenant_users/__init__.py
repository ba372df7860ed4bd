"""Tenant-scoped user management service (FastAPI + SQLAlchemy)."""

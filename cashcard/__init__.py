"""Cash card record-keeping API (FastAPI + SQLAlchemy)."""

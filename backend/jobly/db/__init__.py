"""Database Infrastructure — SQLAlchemy declarative Base shared by all table models."""

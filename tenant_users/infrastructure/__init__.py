"""Infrastructure layer: SQLAlchemy persistence and password hashing."""

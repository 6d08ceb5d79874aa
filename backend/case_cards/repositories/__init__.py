# Repositories package: SQLAlchemy implementations of domain interfaces

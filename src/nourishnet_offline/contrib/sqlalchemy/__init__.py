"""SQLAlchemy 2.0 async durable key-value store."""

"""SQLAlchemy persistence: engine/session, models, repositories."""

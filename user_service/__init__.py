"""User management service: users and their credentials over a REST API."""

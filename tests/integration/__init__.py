"""Integration tests against PostgreSQL, bcrypt and JWT."""

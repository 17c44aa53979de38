"""Infrastructure layer - adapters for the domain protocols.

- persistence/: PostgreSQL models, repositories, unit of work
- security/: bcrypt hashing, JWT codec, reset secret generation
- email/: reset secret delivery
- logging/: structlog adapter
"""

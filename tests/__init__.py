"""Test suite for the user identity service.

Test structure follows the test pyramid:
- unit/: Unit tests - domain logic and handlers with mocked ports
- integration/: Integration tests - real bcrypt/PyJWT, real PostgreSQL
- api/: API endpoint tests - HTTP surface with dependency overrides
"""

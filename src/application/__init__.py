"""Application layer - identity use cases.

- commands/: register, login, refresh, password reset, profile updates
- queries/: token validation, user profile lookup
- dtos/: results handed back to the routers

Handlers return Result values and depend only on domain protocols.
"""

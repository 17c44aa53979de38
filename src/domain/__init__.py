"""Domain layer - accounts, profiles, preferences and reset tickets.

- entities/: dataclasses read from the store
- value_objects/: token claims
- validators/: email and password rules
- protocols/: ports implemented by the infrastructure layer
- errors/: IdentityError catalogue

No framework imports below this package.
"""

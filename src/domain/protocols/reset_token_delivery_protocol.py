"""ResetTokenDeliveryProtocol - out-of-band delivery of reset secrets.

The plaintext secret leaves the service only through this port. The shipped
adapter logs it; a deployment replaces it with email or SMS delivery.
"""

from typing import Protocol


class ResetTokenDeliveryProtocol(Protocol):
    """Protocol for delivering a reset secret to the account owner.

    Implementations:
        - LogResetTokenDelivery: src/infrastructure/email/log_reset_token_delivery.py
    """

    async def send_reset_token(self, email: str, token: str) -> None:
        """Deliver the plaintext secret to ``email``.

        Args:
            email: Recipient (account email).
            token: Plaintext one-time secret.
        """
        ...

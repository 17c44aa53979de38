"""Out-of-band delivery adapters.

- LogResetTokenDelivery: writes reset secrets to the structured log
"""

from src.infrastructure.email.log_reset_token_delivery import LogResetTokenDelivery

__all__ = ["LogResetTokenDelivery"]

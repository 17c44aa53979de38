"""Log-based reset secret delivery (development adapter).

Implements ResetTokenDeliveryProtocol by writing the reset secret to the
structured log instead of sending an email. Swap for a real mail adapter in
deployments that have one.
"""

from src.domain.protocols.logger_protocol import LoggerProtocol


class LogResetTokenDelivery:
    """Delivers reset secrets through the application logger.

    Args:
        logger: Structured logger.
        api_base_url: Public base URL, used to build the reset link.
    """

    def __init__(self, logger: LoggerProtocol, api_base_url: str) -> None:
        self._logger = logger
        self._api_base_url = api_base_url

    async def send_reset_token(self, email: str, token: str) -> None:
        self._logger.info(
            "password_reset_token_issued",
            email=email,
            reset_token=token,
            reset_endpoint=f"{self._api_base_url}/auth/reset-password",
        )

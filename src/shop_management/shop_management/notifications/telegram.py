from __future__ import annotations

import logging
import os
from typing import Optional, Protocol

import requests

from ..core.exceptions import ConfigurationError, DeliveryError

logger = logging.getLogger(__name__)

TELEGRAM_API_BASE = "https://api.telegram.org"
TOKEN_ENV_VAR = "TELEGRAM_BOT_TOKEN"


class Notifier(Protocol):
    def send_message(self, chat_id: str, text: str) -> dict:
        raise NotImplementedError


class TelegramNotifier(Notifier):
    """Sends Markdown text through the Telegram Bot API.

    The bot token is read from the environment on every call, so a missing
    token only fails the call that needs it. No retries.
    """

    def __init__(
        self,
        *,
        session: Optional[requests.Session] = None,
        api_base: str = TELEGRAM_API_BASE,
        timeout: float = 10.0,
    ):
        self._session = session or requests.Session()
        self._api_base = api_base.rstrip("/")
        self._timeout = timeout

    def send_message(self, chat_id: str, text: str) -> dict:
        token = os.environ.get(TOKEN_ENV_VAR)
        if not token:
            logger.error("%s is not set in environment variables.", TOKEN_ENV_VAR)
            raise ConfigurationError("Telegram bot token is not configured.")

        url = f"{self._api_base}/bot{token}/sendMessage"
        try:
            response = self._session.post(
                url,
                json={"chat_id": chat_id, "text": text, "parse_mode": "Markdown"},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            # The URL embeds the token; log the error type only.
            logger.error("Error sending Telegram message: %s", e.__class__.__name__)
            raise DeliveryError("Failed to reach Telegram") from e

        try:
            result = response.json()
        except ValueError:
            raise DeliveryError(f"Telegram returned an unreadable response (HTTP {response.status_code})")
        if not isinstance(result, dict):
            result = {}

        if not response.ok or not result.get("ok"):
            description = result.get("description") or f"HTTP {response.status_code}"
            logger.error("Telegram API Error: %s", description)
            raise DeliveryError(f"Failed to send message to Telegram: {description}")

        return {"success": True, "result": result.get("result")}

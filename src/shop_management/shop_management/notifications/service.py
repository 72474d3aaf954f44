from __future__ import annotations

import logging
from typing import Optional

from ..core.exceptions import NotificationError
from .telegram import Notifier

logger = logging.getLogger(__name__)

CHAT_NOT_FOUND_HINT = (
    "Chat not found. Please ensure TELEGRAM_ADMIN_CHAT_ID is correct and the admin "
    "has started a conversation with the bot."
)


class NotificationService:
    """Use case: deliver payroll summaries to the shop admin's chat.

    Failures come back as ``{"success": False, "error": ...}`` instead of
    exceptions so callers can show them to the user.
    """

    def __init__(self, notifier: Notifier, *, admin_chat_id: Optional[str]):
        self._notifier = notifier
        self._admin_chat_id = (admin_chat_id or "").strip() or None

    def send_admin_summary(self, message: str) -> dict:
        if not self._admin_chat_id:
            logger.error("TELEGRAM_ADMIN_CHAT_ID is not set in environment variables.")
            return {"success": False, "error": "Admin Telegram Chat ID is not configured."}

        try:
            result = self._notifier.send_message(self._admin_chat_id, message)
        except NotificationError as e:
            error = str(e)
            logger.error("Failed to send Telegram message: %s", error)
            if "chat not found" in error.lower():
                return {"success": False, "error": CHAT_NOT_FOUND_HINT}
            return {"success": False, "error": error}

        logger.info("Sent payroll summary to admin chat")
        return {"success": bool(result.get("success"))}

"""Telegram Bot API integration"""

from studio_service.infrastructure.telegram.client import TelegramClient

__all__ = ["TelegramClient"]

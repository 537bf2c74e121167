"""Telegram Bot API Client

Thin async wrapper over the Bot API methods used for lead notifications.
Every call is a single POST; failures of any kind surface as DeliveryError.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Sequence

import httpx

from studio_service.core.dispatch import MEDIA_GROUP_LIMIT, Attachment
from studio_service.core.errors import DeliveryError

logger = logging.getLogger(__name__)

PARSE_MODE = "HTML"


class TelegramClient:
    """Sends messages and files to one chat"""

    def __init__(
        self,
        token: str,
        chat_id: str,
        api_base: str = "https://api.telegram.org",
        timeout: float = 15.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize Telegram client.

        Args:
            token: Bot token (kept out of logs and error messages)
            chat_id: Target chat id
            api_base: Bot API base URL
            timeout: Per-request timeout in seconds
            http_client: Pre-built client (tests inject a MockTransport here)
        """
        if not token:
            raise ValueError("Telegram bot token is required")

        self.chat_id = chat_id
        self._base_url = f"{api_base.rstrip('/')}/bot{token}"
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def _post(
        self,
        method: str,
        json_body: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, str]] = None,
        files: Optional[List[tuple]] = None,
    ) -> Dict[str, Any]:
        url = f"{self._base_url}/{method}"
        try:
            if json_body is not None:
                response = await self._http.post(url, json=json_body)
            else:
                response = await self._http.post(url, data=data, files=files)
        except httpx.HTTPError as e:
            # httpx messages embed the URL, which contains the token
            logger.error(f"Telegram {method} transport failure: {type(e).__name__}")
            raise DeliveryError(f"{method} failed: {type(e).__name__}") from None

        try:
            payload = response.json()
        except ValueError:
            raise DeliveryError(f"{method} returned non-JSON response (HTTP {response.status_code})") from None

        if not isinstance(payload, dict):
            raise DeliveryError(f"{method} returned unexpected payload (HTTP {response.status_code})")

        if response.status_code >= 400 or not payload.get("ok"):
            description = payload.get("description", "unknown error")
            raise DeliveryError(f"{method} rejected (HTTP {response.status_code}): {description}")

        return payload

    def _caption_fields(self, caption: Optional[str], parse_mode: Optional[str]) -> Dict[str, str]:
        fields = {"chat_id": self.chat_id}
        if caption:
            fields["caption"] = caption
            if parse_mode:
                fields["parse_mode"] = parse_mode
        return fields

    async def send_message(self, text: str) -> Dict[str, Any]:
        """Send a plain HTML text message"""
        return await self._post(
            "sendMessage",
            json_body={"chat_id": self.chat_id, "text": text, "parse_mode": PARSE_MODE},
        )

    async def send_photo(self, attachment: Attachment, caption: Optional[str] = None) -> Dict[str, Any]:
        return await self._post(
            "sendPhoto",
            data=self._caption_fields(caption, PARSE_MODE),
            files=[("photo", attachment.as_upload())],
        )

    async def send_video(self, attachment: Attachment, caption: Optional[str] = None) -> Dict[str, Any]:
        return await self._post(
            "sendVideo",
            data=self._caption_fields(caption, PARSE_MODE),
            files=[("video", attachment.as_upload())],
        )

    async def send_media(self, attachment: Attachment, caption: Optional[str] = None) -> Dict[str, Any]:
        """Send one image or video, picking the matching Bot API method"""
        if attachment.is_image:
            return await self.send_photo(attachment, caption)
        return await self.send_video(attachment, caption)

    async def send_media_group(
        self,
        attachments: Sequence[Attachment],
        caption: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Send 2-10 images/videos as one album; the caption goes on the first item"""
        if not 2 <= len(attachments) <= MEDIA_GROUP_LIMIT:
            raise ValueError(f"Media group needs 2-{MEDIA_GROUP_LIMIT} items, got {len(attachments)}")

        media = []
        files = []
        for index, attachment in enumerate(attachments):
            item = {
                "type": "photo" if attachment.is_image else "video",
                "media": f"attach://file{index}",
            }
            if index == 0 and caption:
                item["caption"] = caption
                item["parse_mode"] = PARSE_MODE
            media.append(item)
            files.append((f"file{index}", attachment.as_upload()))

        return await self._post(
            "sendMediaGroup",
            data={"chat_id": self.chat_id, "media": json.dumps(media)},
            files=files,
        )

    async def send_document(
        self,
        attachment: Attachment,
        caption: Optional[str] = None,
        parse_mode: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self._post(
            "sendDocument",
            data=self._caption_fields(caption, parse_mode),
            files=[("document", attachment.as_upload())],
        )

"""
Notification Dispatcher

Delivers a rendered lead message, with any uploaded files, to the studio chat.
The attachment list is classified into exactly one delivery plan; each plan
knows how to send itself through the Telegram client.
"""

import logging
import mimetypes
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, List, Optional, Sequence, Union

from studio_service.core.errors import DeliveryError
from studio_service.core.notification_format import (
    document_reference_caption,
    extra_document_caption,
)

if TYPE_CHECKING:
    from studio_service.infrastructure.telegram.client import TelegramClient

logger = logging.getLogger(__name__)

MEDIA_GROUP_LIMIT = 10
UNNAMED_FILE = "unnamed-file"


@dataclass(frozen=True)
class Attachment:
    """One uploaded file held in memory"""

    filename: str
    content_type: str
    content: bytes = field(repr=False)

    @classmethod
    def from_upload(cls, filename: Optional[str], content_type: Optional[str], content: bytes) -> "Attachment":
        """Build from multipart upload data, filling in missing name/type"""
        name = filename or UNNAMED_FILE
        if not content_type or content_type == "application/octet-stream":
            guessed, _ = mimetypes.guess_type(name)
            content_type = guessed or content_type or "application/octet-stream"
        return cls(filename=name, content_type=content_type, content=content)

    @property
    def is_image(self) -> bool:
        return self.content_type.startswith("image/")

    @property
    def is_video(self) -> bool:
        return self.content_type.startswith("video/")

    @property
    def is_media(self) -> bool:
        return self.is_image or self.is_video

    def as_upload(self) -> tuple:
        """(filename, bytes, content type) triple for a multipart body"""
        return (self.filename, self.content, self.content_type)


# Delivery plans

@dataclass(frozen=True)
class TextOnly:
    kind: ClassVar[str] = "text"

    async def deliver(self, client: "TelegramClient", submission_id: int, message: str) -> None:
        await client.send_message(message)


async def _send_follow_up_documents(
    client: "TelegramClient",
    submission_id: int,
    documents: Sequence[Attachment],
) -> None:
    for document in documents:
        await client.send_document(
            document,
            caption=document_reference_caption(submission_id, document.filename),
        )


@dataclass(frozen=True)
class SingleMedia:
    """One image or video carrying the full message; documents follow"""

    media: Attachment
    documents: Sequence[Attachment] = ()
    kind: ClassVar[str] = "single_media"

    async def deliver(self, client: "TelegramClient", submission_id: int, message: str) -> None:
        await client.send_media(self.media, caption=message)
        await _send_follow_up_documents(client, submission_id, self.documents)


@dataclass(frozen=True)
class MediaGroup:
    """Album of up to MEDIA_GROUP_LIMIT items, message on the first; documents follow"""

    media: Sequence[Attachment]
    documents: Sequence[Attachment] = ()
    dropped: int = 0
    kind: ClassVar[str] = "media_group"

    async def deliver(self, client: "TelegramClient", submission_id: int, message: str) -> None:
        if self.dropped:
            logger.warning(
                f"Submission {submission_id}: {self.dropped} media file(s) over the "
                f"{MEDIA_GROUP_LIMIT}-item album limit were not sent"
            )
        await client.send_media_group(self.media, caption=message)
        await _send_follow_up_documents(client, submission_id, self.documents)


@dataclass(frozen=True)
class DocumentSequence:
    """Documents only: the first carries the full message, the rest a short caption"""

    documents: Sequence[Attachment]
    kind: ClassVar[str] = "documents"

    async def deliver(self, client: "TelegramClient", submission_id: int, message: str) -> None:
        first, *rest = self.documents
        await client.send_document(first, caption=message, parse_mode="HTML")
        for document in rest:
            await client.send_document(document, caption=extra_document_caption(document.filename))


DeliveryPlan = Union[TextOnly, SingleMedia, MediaGroup, DocumentSequence]


def classify_attachments(attachments: Sequence[Attachment]) -> DeliveryPlan:
    """Pick the delivery plan for a set of attachments"""
    media: List[Attachment] = [a for a in attachments if a.is_media]
    documents: List[Attachment] = [a for a in attachments if not a.is_media]

    if not media and not documents:
        return TextOnly()
    if not media:
        return DocumentSequence(documents=tuple(documents))
    if len(media) == 1:
        return SingleMedia(media=media[0], documents=tuple(documents))
    return MediaGroup(
        media=tuple(media[:MEDIA_GROUP_LIMIT]),
        documents=tuple(documents),
        dropped=max(0, len(media) - MEDIA_GROUP_LIMIT),
    )


class NotificationDispatcher:
    """Sends lead notifications; file delivery falls back to plain text"""

    def __init__(self, client: Optional["TelegramClient"]):
        self.client = client

    @property
    def enabled(self) -> bool:
        return self.client is not None

    async def dispatch(
        self,
        submission_id: int,
        message: str,
        attachments: Sequence[Attachment] = (),
    ) -> Optional[str]:
        """
        Deliver a lead notification

        Args:
            submission_id: Stored submission id (used in follow-up captions)
            message: Fully rendered message text
            attachments: Uploaded files, in upload order

        Returns:
            Kind of the plan that was delivered ("text" after a fallback),
            or None when no Telegram client is configured

        Raises:
            DeliveryError: If the text message (or the text fallback) fails
        """
        if not self.enabled:
            logger.warning(f"Telegram is not configured; notification for submission {submission_id} skipped")
            return None

        plan = classify_attachments(attachments)
        if isinstance(plan, TextOnly):
            await plan.deliver(self.client, submission_id, message)
            logger.info(f"Sent text notification for submission {submission_id}")
            return plan.kind

        try:
            await plan.deliver(self.client, submission_id, message)
        except Exception as e:
            logger.error(
                f"File delivery ({plan.kind}) failed for submission {submission_id}: {e}; "
                f"falling back to text"
            )
            try:
                await self.client.send_message(message)
            except DeliveryError:
                raise
            except Exception as fallback_error:
                raise DeliveryError(f"Text fallback failed: {type(fallback_error).__name__}") from fallback_error
            return TextOnly.kind

        logger.info(f"Sent {plan.kind} notification with {len(attachments)} file(s) for submission {submission_id}")
        return plan.kind

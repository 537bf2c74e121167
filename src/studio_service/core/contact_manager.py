"""
Contact Manager

Core business logic for one inbound contact submission:
validate, persist, then notify the studio.
"""

import logging
from typing import Any, Mapping, Sequence

from studio_service.core.dispatch import Attachment, NotificationDispatcher
from studio_service.core.errors import DeliveryError
from studio_service.core.notification_format import render_submission_message
from studio_service.core.validation import validate_submission
from studio_service.infrastructure.store.provider import StudioStore
from studio_service.models.base import utc_now
from studio_service.models.contact import ContactSubmission

logger = logging.getLogger(__name__)


class ContactManager:
    """Business logic for contact submissions"""

    def __init__(
        self,
        store: StudioStore,
        dispatcher: NotificationDispatcher,
        display_timezone: str = "Europe/Kyiv",
    ):
        self.store = store
        self.dispatcher = dispatcher
        self.display_timezone = display_timezone

    async def submit(
        self,
        payload: Mapping[str, Any],
        attachments: Sequence[Attachment] = (),
        total_price: int = 0,
    ) -> ContactSubmission:
        """
        Accept one contact form submission

        Args:
            payload: Form fields keyed by wire name
            attachments: Uploaded files (already reflected in payload["attachments"])
            total_price: Client-computed total, used only for display

        Returns:
            Stored submission

        Raises:
            ValidationError: If the payload breaks any rule; nothing is stored
        """
        candidate = validate_submission(payload).unwrap()
        submission = await self.store.create_contact_submission(candidate)
        logger.info(
            f"Stored contact submission {submission.id} "
            f"({len(submission.services)} service(s), {len(attachments)} file(s))"
        )

        await self.notify(submission, attachments, total_price)
        return submission

    async def notify(
        self,
        submission: ContactSubmission,
        attachments: Sequence[Attachment] = (),
        total_price: int = 0,
    ) -> None:
        """Send the studio notification; failures are logged, never raised"""
        try:
            message = render_submission_message(
                submission,
                total_price=total_price,
                submitted_at=utc_now(),
                timezone=self.display_timezone,
            )
            await self.dispatcher.dispatch(submission.id, message, attachments)
        except DeliveryError as e:
            logger.error(f"Notification for submission {submission.id} was not delivered: {e}")
        except Exception:
            logger.exception(f"Unexpected error while notifying about submission {submission.id}")

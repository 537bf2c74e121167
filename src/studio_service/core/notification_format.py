"""
Notification Formatting

Renders a contact submission into the Telegram HTML message sent to the studio.
"""

from datetime import datetime
from html import escape
from typing import Iterable, List, Mapping
from zoneinfo import ZoneInfo

from studio_service.models.contact import ContactSubmission

# Service name -> price in UAH
SERVICE_PRICES: Mapping[str, int] = {
    "Повнометражний фільм": 16000,
    "Емоційний кліп": 8000,
    "Ранок нареченої": 4000,
    "Збори нареченого": 4000,
    "Фотопослуги": 6000,
    "Love Story": 5000,
}

CURRENCY = "грн"
TIMESTAMP_FORMAT = "%d.%m.%Y, %H:%M:%S"


def service_price(name: str) -> int:
    """Price of one service; unknown services cost 0"""
    return SERVICE_PRICES.get(name, 0)


def calculate_total(services: Iterable[str]) -> int:
    return sum(service_price(name) for name in services)


def format_price(amount: int) -> str:
    return f"{amount:,} {CURRENCY}"


def format_services(services: List[str]) -> str:
    if not services:
        return "Не вказано"
    return "\n".join(
        f"• {escape(name)} - {format_price(service_price(name))}" for name in services
    )


def render_submission_message(
    submission: ContactSubmission,
    total_price: int,
    submitted_at: datetime,
    timezone: str = "Europe/Kyiv",
) -> str:
    """Build the full lead message.

    Args:
        submission: Stored submission (id already assigned)
        total_price: Client-computed total; shown only when positive
        submitted_at: Aware datetime of the submission
        timezone: IANA zone used to display submitted_at

    Returns:
        HTML-formatted message text
    """
    local_time = submitted_at.astimezone(ZoneInfo(timezone))

    lines = [
        "🎬 <b>Нова заявка на весільну зйомку!</b>",
        "",
        f"👰 <b>Наречена:</b> {escape(submission.bride_name)}",
        f"🤵 <b>Наречений:</b> {escape(submission.groom_name)}",
        f"📞 <b>Телефон:</b> {escape(submission.phone)}",
        f"📧 <b>Email:</b> {escape(submission.email)}",
        f"📅 <b>Дата весілля:</b> {escape(submission.wedding_date)}",
        f"📍 <b>Локація:</b> {escape(submission.location)}",
        "",
        "🎥 <b>Послуги:</b>",
        format_services(submission.services),
        "",
    ]

    if total_price > 0:
        lines += [f"💰 <b>Загальна вартість:</b> {format_price(total_price)}", ""]

    if submission.additional_info:
        lines += ["💬 <b>Додаткова інформація:</b>", escape(submission.additional_info), ""]

    lines += [
        f"📝 <b>ID заявки:</b> {submission.id}",
        f"⏰ <b>Час подачі:</b> {local_time.strftime(TIMESTAMP_FORMAT)}",
    ]
    return "\n".join(lines)


def document_reference_caption(submission_id: int, filename: str) -> str:
    """Caption for a document that follows an already-sent media message"""
    return f"📎 Додатковий документ до заявки #{submission_id}: {filename}"


def extra_document_caption(filename: str) -> str:
    """Caption for the second and later documents of a documents-only lead"""
    return f"📎 Додатковий документ: {filename}"

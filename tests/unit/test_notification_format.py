"""Unit tests for lead message formatting"""

from datetime import datetime, timezone

import pytest

from studio_service.core.notification_format import (
    calculate_total,
    document_reference_caption,
    format_services,
    render_submission_message,
    service_price,
)
from studio_service.models.contact import ContactSubmission

SUBMITTED_AT = datetime(2025, 6, 1, 9, 30, 15, tzinfo=timezone.utc)


def make_submission(**overrides):
    fields = dict(
        id=7,
        bride_name="Anna",
        groom_name="Oleksiy",
        phone="380972056022",
        email="a@b.com",
        wedding_date="2025-09-01",
        location="Kyiv",
        services=["Love Story"],
        created_at=SUBMITTED_AT,
    )
    fields.update(overrides)
    return ContactSubmission(**fields)


@pytest.mark.unit
class TestPricing:

    def test_known_and_unknown_services(self):
        assert service_price("Повнометражний фільм") == 16000
        assert service_price("Drone shots") == 0

    def test_total(self):
        assert calculate_total(["Love Story", "Фотопослуги", "Drone shots"]) == 11000

    def test_unknown_service_is_still_listed(self):
        text = format_services(["Love Story", "Drone shots"])

        assert "• Love Story - 5,000 грн" in text
        assert "• Drone shots - 0 грн" in text


@pytest.mark.unit
class TestRenderSubmissionMessage:

    def test_contains_submission_details(self):
        message = render_submission_message(make_submission(), 5000, SUBMITTED_AT)

        assert "<b>Наречена:</b> Anna" in message
        assert "<b>Наречений:</b> Oleksiy" in message
        assert "<b>Телефон:</b> 380972056022" in message
        assert "<b>Дата весілля:</b> 2025-09-01" in message
        assert "• Love Story - 5,000 грн" in message
        assert "<b>ID заявки:</b> 7" in message

    def test_timestamp_in_display_timezone(self):
        message = render_submission_message(make_submission(), 0, SUBMITTED_AT, timezone="Europe/Kyiv")

        # Kyiv is UTC+3 in summer
        assert "01.06.2025, 12:30:15" in message

    def test_total_only_when_positive(self):
        assert "Загальна вартість" not in render_submission_message(make_submission(), 0, SUBMITTED_AT)
        assert "💰 <b>Загальна вартість:</b> 21,000 грн" in render_submission_message(
            make_submission(), 21000, SUBMITTED_AT
        )

    def test_additional_info_block(self):
        without = render_submission_message(make_submission(), 0, SUBMITTED_AT)
        with_info = render_submission_message(
            make_submission(additional_info="Ceremony at 14:00"), 0, SUBMITTED_AT
        )

        assert "Додаткова інформація" not in without
        assert "Додаткова інформація:</b>\nCeremony at 14:00" in with_info

    def test_user_input_is_escaped(self):
        message = render_submission_message(make_submission(bride_name="<b>Anna</b> & co"), 0, SUBMITTED_AT)

        assert "&lt;b&gt;Anna&lt;/b&gt; &amp; co" in message

    def test_is_deterministic(self):
        submission = make_submission()

        assert render_submission_message(submission, 5000, SUBMITTED_AT) == render_submission_message(
            submission, 5000, SUBMITTED_AT
        )

    def test_document_reference_caption(self):
        assert document_reference_caption(7, "contract.pdf") == "📎 Додатковий документ до заявки #7: contract.pdf"

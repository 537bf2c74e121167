"""API tests for the contact form endpoint and the submissions listing"""

import json

import httpx
import pytest
from httpx import ASGITransport

from conftest import TEST_CHAT_ID, TEST_TOKEN, media_group_items, multipart_field
from studio_service.config.settings import Settings
from studio_service.core.dispatch import NotificationDispatcher
from studio_service.main import create_app


def contact_payload(**overrides):
    payload = {
        "brideName": "Anna",
        "groomName": "Oleksiy",
        "phone": "380972056022",
        "email": "a@b.com",
        "weddingDate": "2025-09-01",
        "location": "Kyiv",
        "services": ["Love Story"],
        "totalPrice": 5000,
    }
    payload.update(overrides)
    return payload


def form_fields(**overrides):
    fields = contact_payload(**overrides)
    fields["services"] = json.dumps(fields["services"])
    fields["totalPrice"] = str(fields["totalPrice"])
    return fields


@pytest.mark.unit
class TestSubmitContactJson:

    async def test_submission_is_stored_and_listed(self, client, recorder):
        response = await client.post("/api/contact", json=contact_payload())

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        submission_id = body["id"]

        listed = (await client.get("/api/contact-submissions")).json()
        assert listed[0]["id"] == submission_id
        assert listed[0]["services"] == ["Love Story"]
        assert listed[0]["brideName"] == "Anna"
        assert listed[0]["attachments"] == []
        assert "createdAt" in listed[0]

        assert recorder.methods == ["sendMessage"]
        sent = json.loads(recorder.requests_for("sendMessage")[0].content)
        assert sent["chat_id"] == TEST_CHAT_ID
        assert sent["parse_mode"] == "HTML"
        assert f"ID заявки:</b> {submission_id}" in sent["text"]
        assert "5,000 грн" in sent["text"]

    async def test_newest_submission_listed_first(self, client):
        first = (await client.post("/api/contact", json=contact_payload(brideName="First"))).json()["id"]
        second = (await client.post("/api/contact", json=contact_payload(brideName="Second"))).json()["id"]

        listed = (await client.get("/api/contact-submissions")).json()

        assert [s["id"] for s in listed] == [second, first]

    async def test_invalid_fields_are_reported_and_not_stored(self, client, recorder):
        response = await client.post(
            "/api/contact",
            json=contact_payload(brideName="", phone="+380 97", email="not-an-email", services=[]),
        )

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Невірні дані форми"
        fields = {error["field"] for error in body["errors"]}
        assert fields == {"brideName", "phone", "email", "services"}

        assert (await client.get("/api/contact-submissions")).json() == []
        assert recorder.calls == []

    async def test_missing_fields(self, client):
        response = await client.post("/api/contact", json={"services": ["Love Story"]})

        assert response.status_code == 400
        fields = {error["field"] for error in response.json()["errors"]}
        assert {"brideName", "groomName", "phone", "email", "weddingDate", "location"} <= fields

    async def test_malformed_json(self, client):
        response = await client.post(
            "/api/contact",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["success"] is False

    async def test_non_object_json(self, client):
        response = await client.post("/api/contact", json=["Anna"])

        assert response.status_code == 400

    async def test_notification_failure_does_not_fail_submission(self, client, recorder):
        recorder.reject_methods.add("sendMessage")

        response = await client.post("/api/contact", json=contact_payload())

        assert response.status_code == 200
        assert len((await client.get("/api/contact-submissions")).json()) == 1

    async def test_store_failure_returns_500(self, client, store, recorder, monkeypatch):
        async def broken(data):
            raise RuntimeError("disk full")

        monkeypatch.setattr(store, "create_contact_submission", broken)

        response = await client.post("/api/contact", json=contact_payload())

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Помилка сервера. Спробуйте пізніше."}
        assert recorder.calls == []

    async def test_submission_without_telegram(self, settings, store, session_store):
        app = create_app(
            settings=settings,
            store=store,
            session_store=session_store,
            dispatcher=NotificationDispatcher(None),
        )
        async with httpx.AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as api:
            response = await api.post("/api/contact", json=contact_payload())

        assert response.status_code == 200


@pytest.mark.unit
class TestSubmitContactForm:

    async def test_form_without_files(self, client, recorder):
        response = await client.post("/api/contact", data=form_fields())

        assert response.status_code == 200
        listed = (await client.get("/api/contact-submissions")).json()
        assert listed[0]["services"] == ["Love Story"]
        assert recorder.methods == ["sendMessage"]

    async def test_single_photo(self, client, recorder):
        response = await client.post(
            "/api/contact",
            data=form_fields(),
            files=[("files", ("venue.jpg", b"jpeg-bytes", "image/jpeg"))],
        )

        assert response.status_code == 200
        assert recorder.methods == ["sendPhoto"]
        caption = multipart_field(recorder.requests_for("sendPhoto")[0], "caption")
        assert f"ID заявки:</b> {response.json()['id']}" in caption

        listed = (await client.get("/api/contact-submissions")).json()
        assert listed[0]["attachments"] == ["venue.jpg"]

    async def test_several_photos_go_as_album(self, client, recorder):
        files = [("files", (f"p{i}.jpg", b"jpeg-bytes", "image/jpeg")) for i in range(3)]

        response = await client.post("/api/contact", data=form_fields(), files=files)

        assert response.status_code == 200
        assert recorder.methods == ["sendMediaGroup"]
        items = media_group_items(recorder.requests_for("sendMediaGroup")[0])
        assert [item["type"] for item in items] == ["photo", "photo", "photo"]
        assert "caption" in items[0]
        assert "caption" not in items[1]

    async def test_documents_only(self, client, recorder):
        files = [
            ("files", ("brief.pdf", b"%PDF", "application/pdf")),
            ("files", ("plan.docx", b"docx", "application/octet-stream")),
        ]

        response = await client.post("/api/contact", data=form_fields(), files=files)

        assert response.status_code == 200
        assert recorder.methods == ["sendDocument", "sendDocument"]
        first, second = recorder.requests_for("sendDocument")
        assert multipart_field(first, "parse_mode") == "HTML"
        assert multipart_field(second, "caption") == "📎 Додатковий документ: plan.docx"

    async def test_file_delivery_failure_falls_back_to_text(self, client, recorder):
        recorder.unreachable_methods.add("sendPhoto")

        response = await client.post(
            "/api/contact",
            data=form_fields(),
            files=[("files", ("venue.jpg", b"jpeg-bytes", "image/jpeg"))],
        )

        assert response.status_code == 200
        assert recorder.methods == ["sendPhoto", "sendMessage"]

    async def test_form_content_type_is_case_insensitive(self, client, recorder):
        request = client.build_request(
            "POST",
            "/api/contact",
            data=form_fields(),
            files=[("files", ("venue.jpg", b"jpeg-bytes", "image/jpeg"))],
        )
        request.headers["content-type"] = request.headers["content-type"].replace(
            "multipart/form-data", "Multipart/Form-Data"
        )

        response = await client.send(request)

        assert response.status_code == 200
        assert recorder.methods == ["sendPhoto"]

    async def test_bad_services_json(self, client, recorder):
        response = await client.post(
            "/api/contact",
            data={**form_fields(), "services": "[not json"},
            files=[("files", ("venue.jpg", b"jpeg-bytes", "image/jpeg"))],
        )

        assert response.status_code == 400
        assert [error["field"] for error in response.json()["errors"]] == ["services"]
        assert recorder.calls == []

    async def test_unparsable_total_price_is_omitted(self, client, recorder):
        response = await client.post("/api/contact", data={**form_fields(), "totalPrice": "abc"})

        assert response.status_code == 200
        text = json.loads(recorder.requests_for("sendMessage")[0].content)["text"]
        assert "грн" in text
        assert "Загальна вартість" not in text

    async def test_file_too_large(self, store, session_store, dispatcher, recorder):
        settings = Settings(
            _env_file=None,
            telegram_bot_token=TEST_TOKEN,
            telegram_chat_id=TEST_CHAT_ID,
            max_file_size_mb=1,
        )
        app = create_app(settings=settings, store=store, session_store=session_store, dispatcher=dispatcher)

        async with httpx.AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as api:
            response = await api.post(
                "/api/contact",
                data=form_fields(),
                files=[("files", ("huge.mp4", b"0" * (1024 * 1024 + 1), "video/mp4"))],
            )

        assert response.status_code == 400
        assert response.json()["message"].startswith("Файл занадто великий")
        assert await store.get_contact_submissions() == []
        assert recorder.calls == []

import logging
import uuid

import pytest
from starlette.testclient import TestClient

from errorgate.api.v1.error_handlers import render_status, transport_status
from errorgate.core.status import Status, StatusDescriptor


class TestTransportStatus:

    @pytest.mark.parametrize(
        "code, expected",
        [(400, 400), (404, 404), (500, 500), (0, 200), (4006, 200), (5000, 200), (99, 200)],
    )
    def test_http_codes_pass_through_business_codes_map_to_200(self, code, expected):
        assert transport_status(StatusDescriptor(code=code, label="x")) == expected


class TestApiExceptionResponses:
    """
    End-to-end through FastAPI: routes raise APIException, clients get JSON.

    Fixtures:
      - client: TestClient over create_app(test settings) plus raising routes
    """

    def test_bad_request_body(self, client: TestClient):
        resp = client.get("/api/bad-request")

        assert resp.status_code == 400
        assert resp.headers["content-type"].startswith("application/json")
        assert resp.json() == {
            "status": {"code": 400, "label": "BadRequest"},
            "data": None,
            "message": "missing field",
        }

    def test_empty_message_and_payload(self, client: TestClient):
        resp = client.get("/api/server-error")

        assert resp.status_code == 500
        assert resp.json() == {
            "status": {"code": 500, "label": "ServerError"},
            "data": {"id": 7},
            "message": "",
        }

    def test_business_status_rides_in_200(self, client: TestClient):
        resp = client.get("/api/validation")

        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == {"code": Status.FAIL_VALIDATION.code, "label": Status.FAIL_VALIDATION.label}
        assert body["message"] == "email is required"

    def test_error_is_logged_with_request_id(self, client: TestClient, caplog):
        caplog.set_level(logging.ERROR, logger="errorgate.exceptions.mapper")
        rid = str(uuid.uuid4())

        resp = client.get("/api/bad-request", headers={"X-Request-ID": rid})

        assert resp.status_code == 400
        assert "BadRequest:missing field" in caplog.text
        record = next(r for r in caplog.records if r.name == "errorgate.exceptions.mapper")
        assert record.exc_info is not None
        # stamped by the RequestIdFilter on the console handler, which runs before caplog's
        assert record.request_id == rid


class TestViewExceptionResponses:

    def test_configured_page_redirects(self, client: TestClient):
        resp = client.get("/pages/missing")

        assert resp.status_code == 302
        assert resp.headers["location"] == "/custom-404"

    def test_unconfigured_status_renders_error_page(self, client: TestClient):
        resp = client.get("/pages/forbidden")

        assert resp.status_code == 403
        assert resp.headers["content-type"].startswith("text/html")
        assert "status=403" in resp.text
        assert "forbidden" in resp.text
        assert "errorgate.exceptions.base.ViewException" in resp.text

    def test_empty_configured_page_renders_fallback_message(self, client: TestClient):
        resp = client.get("/pages/gone")

        assert resp.status_code == 410
        assert "No message available" in resp.text

    def test_bodyless_status_renders_page_as_200(self, client: TestClient):
        resp = client.get("/pages/no-content")

        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        # the page still reports the status that was raised
        assert "status=204" in resp.text
        assert "no content" in resp.text

    @pytest.mark.parametrize(
        "http_status, expected",
        [(100, 200), (103, 200), (204, 200), (205, 200), (304, 200), (200, 200), (403, 403), (503, 503)],
    )
    def test_render_status(self, http_status, expected):
        assert render_status(http_status) == expected


class TestUnhandledExceptions:

    def test_other_exceptions_reach_default_500(self, client: TestClient):
        resp = client.get("/boom")

        assert resp.status_code == 500
        assert "boom" not in resp.text


class TestAppFactory:

    def test_health(self, client: TestClient):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_request_id_echoed(self, client: TestClient):
        rid = str(uuid.uuid4())
        assert client.get("/health", headers={"X-Request-ID": rid}).headers["X-Request-ID"] == rid

    def test_invalid_request_id_replaced(self, client: TestClient):
        resp = client.get("/health", headers={"X-Request-ID": "not-a-uuid"})
        echoed = resp.headers["X-Request-ID"]
        assert echoed != "not-a-uuid"
        uuid.UUID(echoed)

    def test_translator_built_once_on_state(self, app):
        translator = app.state.error_translator
        assert translator.view_handler.registry.lookup(404) == "/custom-404"

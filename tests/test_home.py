import pytest

from app import create_app


def _client():
    app = create_app("TestingConfig")
    return app.test_client()


def test_home_lists_plugins():
    response = _client().get("/")
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    assert payload["data"]["site"]["name"] == "Unit Converter AIO"
    titles = [item["title"] for item in payload["data"]["plugins"]]
    assert titles == ["Unit Converter"]
    assert response.headers.get("Content-Security-Policy")
    assert response.headers.get("Cache-Control") == "no-store"


def test_request_id_is_echoed():
    response = _client().get("/", headers={"X-Request-ID": "abc123"})
    assert response.headers.get("X-Request-ID") == "abc123"


def test_unknown_route_returns_json_error():
    response = _client().get("/does-not-exist")
    assert response.status_code == 404
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["error"]["code"] == "not_found"


def test_method_not_allowed_uses_http_code():
    response = _client().get("/api/unit_converter/convert")
    assert response.status_code == 405
    assert response.get_json()["error"]["code"] == "http.405"


def test_configured_custom_units_file_is_resolved():
    app = create_app("TestingConfig")
    settings = app.config["PLUGIN_SETTINGS"]["unit_converter"]
    assert settings["custom_units_file"].endswith("custom_units.yml")
    assert settings["max_custom_units_chars"] == 20000


def test_default_custom_units_file_extends_resolution():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        json={"value": 2, "from_unit": "kmol", "to_unit": "mol"},
    )
    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["value"] == pytest.approx(2000)
    assert data["reference"] == "CUSTOM"
    lookup = client.get("/api/unit_converter/units/deg").get_json()["data"]
    assert lookup["reference"] == "CUSTOM::ANGLE"

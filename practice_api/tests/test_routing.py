import pytest
from flask.testing import FlaskClient

PONG_BODY = b'{"message":"pong"}'


@pytest.mark.parametrize("method", ["post", "put", "delete", "patch"])
def test_other_methods_on_ping_do_not_pong(client: FlaskClient, method: str):
    response = getattr(client, method)("/ping")

    assert response.status_code == 405
    assert PONG_BODY not in response.data


@pytest.mark.parametrize("path", ["/unknown", "/", "/ping/extra", "/api/ping"])
def test_unknown_paths_return_404(client: FlaskClient, path: str):
    response = client.get(path)

    assert response.status_code == 404
    assert PONG_BODY not in response.data


def test_handler_failure_returns_500(app, client: FlaskClient):
    @app.get("/boom")
    def boom():
        raise RuntimeError("boom")

    app.config.update(TESTING=False, PROPAGATE_EXCEPTIONS=False)
    response = client.get("/boom")

    assert response.status_code == 500


def test_allowed_origin_gets_cors_headers(client: FlaskClient):
    response = client.get("/ping", headers={"Origin": "http://localhost:5173"})

    assert response.headers["Access-Control-Allow-Origin"] == "http://localhost:5173"


def test_unlisted_origin_gets_no_cors_headers(client: FlaskClient):
    response = client.get("/ping", headers={"Origin": "http://evil.example"})

    assert response.status_code == 200
    assert "Access-Control-Allow-Origin" not in response.headers

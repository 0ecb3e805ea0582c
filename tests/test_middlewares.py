import logging

from fastapi import FastAPI
from fastapi.testclient import TestClient

from middlewares.timing import TimingMiddleware


def _app():
    app = FastAPI()
    app.add_middleware(TimingMiddleware)

    @app.get("/ok")
    def ok():
        return {"ok": True}

    @app.get("/boom")
    def boom():
        raise RuntimeError("boom")

    return app


def test_latency_header_and_access_log(caplog):
    client = TestClient(_app())

    with caplog.at_level(logging.INFO, logger="remuneration.access"):
        res = client.get("/ok")

    assert res.status_code == 200
    assert "X-Latency-Ms" in res.headers
    assert "GET /ok -> 200" in caplog.text


def test_failed_request_still_logged(caplog):
    client = TestClient(_app(), raise_server_exceptions=False)

    with caplog.at_level(logging.INFO, logger="remuneration.access"):
        res = client.get("/boom")

    assert res.status_code == 500
    assert "GET /boom -> 500" in caplog.text

# tests/test_hello.py

from fastapi.testclient import TestClient

from app.api.hello import GreetingEndpoint
from app.main import create_app


class StubProvider:
    def __init__(self, text):
        self.text = text
        self.calls = 0

    def say_hello(self):
        self.calls += 1
        return self.text


def test_hello_returns_greeting(client):
    resp = client.get("/hello")

    assert resp.status_code == 200
    assert resp.text == "Hello World"
    assert resp.headers["content-type"].startswith("text/plain")


def test_hello_is_idempotent(client):
    bodies = [client.get("/hello").text for _ in range(3)]

    assert bodies == ["Hello World"] * 3


def test_other_paths_are_not_routed(client):
    assert client.get("/goodbye").status_code == 404
    assert client.get("/hello/extra").status_code == 404


def test_hello_only_accepts_get(client):
    assert client.post("/hello").status_code == 405


def test_injected_provider_is_used_verbatim():
    stub = StubProvider("Bonjour, tout le monde")
    with TestClient(create_app(provider=stub)) as c:
        resp = c.get("/hello")

    assert resp.text == "Bonjour, tout le monde"
    assert stub.calls == 1


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_endpoint_route_table():
    endpoint = GreetingEndpoint(StubProvider("hi"))

    routes = endpoint.routes()

    assert len(routes) == 1
    path, method, handler = routes[0]
    assert (path, method) == ("/hello", "GET")
    assert handler() == "hi"

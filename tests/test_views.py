"""
Greeting, health, htmx views and the CORS policy.
"""
from __future__ import annotations


def test_root_greeting(client) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.mimetype == "text/plain"
    assert response.get_data(as_text=True) == "Hello world"


def test_health(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"status": "healthy", "service": "userhub"}


def test_htmx_index_page(client) -> None:
    response = client.get("/htmx-index")
    body = response.get_data(as_text=True)

    assert response.status_code == 200
    assert response.mimetype == "text/html"
    assert 'hx-get="/htmx-users"' in body


def test_htmx_users_fragment_lists_each_user(client) -> None:
    client.post("/users", json={"username": "alice"})
    client.post("/users", json={"username": "bob"})

    response = client.get("/htmx-users")
    body = response.get_data(as_text=True)

    assert response.status_code == 200
    assert response.mimetype == "text/html"
    assert "<html" not in body
    assert body.count("<li data-user-id=") == 2
    assert body.index(">alice</li>") < body.index(">bob</li>")


def test_htmx_users_fragment_on_empty_store(client) -> None:
    body = client.get("/htmx-users").get_data(as_text=True)

    assert "No users yet" in body
    assert "data-user-id" not in body


def test_htmx_users_fragment_escapes_usernames(client) -> None:
    client.post("/users", json={"username": "<script>alert(1)</script>"})

    body = client.get("/htmx-users").get_data(as_text=True)

    assert "<script>" not in body
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in body


def test_html_views_can_be_disabled(make_app) -> None:
    client = make_app(ENABLE_HTML_VIEWS=False, CORS_ALLOW_ALL=False).test_client()

    assert client.get("/htmx-index").status_code == 404
    assert client.get("/htmx-users").status_code == 404
    assert client.get("/users").status_code == 200


def test_cors_headers_when_enabled(client) -> None:
    response = client.get("/users", headers={"Origin": "https://example.com"})

    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_cors_preflight(client) -> None:
    response = client.options(
        "/users",
        headers={
            "Origin": "https://example.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type",
        },
    )

    assert response.status_code == 200
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert "POST" in response.headers["Access-Control-Allow-Methods"]


def test_cors_headers_on_error_responses(client) -> None:
    response = client.post("/users", json={})

    assert response.status_code == 400
    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_no_cors_headers_when_disabled(make_app) -> None:
    client = make_app(CORS_ALLOW_ALL=False).test_client()

    response = client.get("/users", headers={"Origin": "https://example.com"})

    assert "Access-Control-Allow-Origin" not in response.headers


def test_cors_follows_html_views_flag_by_default(make_app) -> None:
    client = make_app(ENABLE_HTML_VIEWS=False).test_client()

    response = client.get("/users", headers={"Origin": "https://example.com"})

    assert "Access-Control-Allow-Origin" not in response.headers


def test_cors_can_be_enabled_without_html_views(make_app) -> None:
    client = make_app(ENABLE_HTML_VIEWS=False, CORS_ALLOW_ALL=True).test_client()

    response = client.get("/users", headers={"Origin": "https://example.com"})

    assert response.headers["Access-Control-Allow-Origin"] == "*"

import json

import pytest

from restaurant_client.cli import build_parser, main, parse_param, run

pytestmark = pytest.mark.anyio


def parse(*argv):
    return build_parser().parse_args(list(argv))


async def test_login_stores_token(client, backend, token_store, capsys):
    backend.respond(200, json={"token": "t-123", "user": {"id": 1}})

    code = await run(parse("login", "--email", "m@r.com", "--password", "pw"), client)

    assert code == 0
    assert token_store.read() == "t-123"
    assert backend.last.url.path == "/api/auth/login"
    assert json.loads(backend.last.content) == {"email": "m@r.com", "password": "pw"}
    assert "Signed in as m@r.com" in capsys.readouterr().out


async def test_login_accepts_access_token_key(client, backend, token_store):
    backend.respond(200, json={"access_token": "jwt"})
    assert await run(parse("login", "--email", "m@r.com", "--password", "pw"), client) == 0
    assert token_store.read() == "jwt"


async def test_login_without_token_fails(client, backend, token_store):
    backend.respond(200, json={"message": "check your inbox"})
    assert await run(parse("login", "--email", "m@r.com", "--password", "pw"), client) == 1
    assert token_store.read() is None


async def test_logout_clears_token(client, backend, token_store):
    token_store.write("t-123")
    assert await run(parse("logout"), client) == 0
    assert token_store.read() is None
    assert backend.last.url.path == "/api/auth/logout"


async def test_call_with_path_and_body_fields(client, backend, capsys):
    backend.respond(200, json={"id": 7, "status": "occupied"})

    code = await run(parse("call", "table", "change_status", "7", "occupied"), client)

    assert code == 0
    assert backend.last.method == "PATCH"
    assert backend.last.url.path == "/api/table/tables/7/status"
    assert json.loads(backend.last.content) == {"status": "occupied"}
    assert json.loads(capsys.readouterr().out) == {"id": 7, "status": "occupied"}


async def test_call_with_json_body(client, backend):
    code = await run(
        parse("call", "menu", "update_item", "9", "--json", '{"price": 7.99}'),
        client,
    )
    assert code == 0
    assert backend.last.url.path == "/api/menu/items/9"
    assert json.loads(backend.last.content) == {"price": 7.99}


async def test_call_with_repeated_params(client, backend):
    code = await run(
        parse(
            "call", "reservation", "get_all",
            "--param", "date=2024-01-15",
            "--param", "date=2024-01-16",
        ),
        client,
    )
    assert code == 0
    assert backend.last.url.params.multi_items() == [
        ("date", "2024-01-15"),
        ("date", "2024-01-16"),
    ]


async def test_call_reports_api_errors(client, backend, capsys):
    backend.respond(404, json={"message": "not found"})

    code = await run(parse("call", "payment", "get", "99"), client)

    assert code == 1
    captured = capsys.readouterr()
    assert "Error (404): not found" in captured.err


@pytest.mark.parametrize(
    "argv",
    [
        ("call", "table", "teleport"),
        ("call", "table", "get_all", "--json", "{}"),
        ("call", "table", "get_all", "--param", "a=b"),
        ("call", "reservation", "get_all", "--param", "nope"),
        ("call", "menu", "create_item", "--json", "{not json"),
        ("call", "table", "get"),
    ],
)
async def test_call_usage_errors(client, backend, argv):
    assert await run(parse(*argv), client) == 2
    assert backend.requests == []


def test_parse_param():
    assert parse_param("date=2024-01-15") == ("date", "2024-01-15")
    assert parse_param("q=a=b") == ("q", "a=b")
    with pytest.raises(ValueError):
        parse_param("=x")


def test_endpoints_listing(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("TOKEN_FILE", str(tmp_path / "session.json"))

    assert main(["endpoints"]) == 0

    out = capsys.readouterr().out
    assert "reservation   check_availability" in out
    assert "/menu/order-items/{id}" in out

import pytest

from pos_api.services import productos as productos_service


@pytest.mark.parametrize(
    "method,path",
    [
        ("GET", "/"),
        ("GET", "/clientes"),
        ("PATCH", "/productos/1"),
        ("DELETE", "/ventas/1"),
        ("GET", "/productos/abc"),
        ("GET", "/productos/validate/sku"),
        ("GET", "/productos/"),
        ("GET", "/ventas/"),
    ],
)
def test_unmatched_routes_are_404(client, method, path):
    response = client.request(method, path)
    assert response.status_code == 404
    assert response.json() == {"error": "Ruta no encontrada"}


@pytest.mark.parametrize("path", ["/productos", "/ventas/3", "/no-existe"])
def test_preflight_short_circuits(client, path):
    response = client.options(path)
    assert response.status_code == 200
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"
    assert "OPTIONS" in response.headers["access-control-allow-methods"]


def test_responses_carry_cors_headers(client):
    response = client.get("/productos")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-methods"] == "GET, POST, PUT, DELETE, OPTIONS"

    not_found = client.get("/nada")
    assert not_found.headers["access-control-allow-origin"] == "*"


def test_unexpected_error_hides_internals(client, monkeypatch):
    def _explota(db):
        raise RuntimeError("detalle interno de la base")

    monkeypatch.setattr(productos_service, "listar_productos", _explota)

    response = client.get("/productos")
    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Error interno del servidor"
    assert body["error_id"]
    assert "stack" not in body
    assert "detalle interno" not in response.text
    assert response.headers["access-control-allow-origin"] == "*"


def test_invalid_json_is_400(client):
    response = client.post(
        "/productos",
        content=b"{no es json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["error"].startswith("Datos inválidos")


def test_exact_routes_win_over_id_routes(client, crear_producto):
    crear_producto()
    response = client.post("/productos/search", json={"query": "Lá"})
    assert response.status_code == 200
    assert isinstance(response.json(), list)

import pytest

from pos_api.models.ventas import ItemVenta, Venta
from pos_api.services import ventas as service


def test_create_sale_with_custom_item(client, venta_payload):
    response = client.post("/ventas", json=venta_payload)
    assert response.status_code == 201
    body = response.json()
    assert isinstance(body["id"], int)
    assert body["message"] == "Venta registrada"

    detalle = client.get(f"/ventas/{body['id']}")
    assert detalle.status_code == 200
    venta = detalle.json()
    assert venta["id"] == body["id"]
    assert venta["tipo"] == "mostrador"
    assert venta["total"] == 10
    assert venta["fecha_creacion"]
    assert len(venta["items"]) == 1
    item = venta["items"][0]
    assert item["venta_id"] == body["id"]
    assert item["producto_id"] is None
    assert item["producto_nombre"] == "X"
    assert item["producto_sku"] == "X1"
    assert item["es_personalizado"] is True


def test_create_sale_keeps_amounts_as_submitted(client, crear_producto):
    producto_id = crear_producto()
    payload = {
        "tipo": "delivery",
        "subtotal": 25,
        "descuento": 5,
        "total": 20,
        "cliente_nombre": "Ana",
        "cliente_contacto": "555-0101",
        "items": [
            {"producto_id": producto_id, "nombre": "Lápiz", "codigo_interno_sku": "LP-1",
             "cantidad": 2, "precio_unitario": 5, "subtotal": 10},
            {"nombre": "Envoltura", "cantidad": 1, "precio_unitario": 8, "subtotal": 8, "es_personalizado": 1},
            {"producto_id": producto_id, "nombre": "Lápiz", "codigo_interno_sku": "LP-1",
             "cantidad": 3, "precio_unitario": 5, "subtotal": 15},
        ],
    }
    venta_id = client.post("/ventas", json=payload).json()["id"]

    venta = client.get(f"/ventas/{venta_id}").json()
    assert venta["subtotal"] == 25
    assert venta["descuento"] == 5
    assert venta["total"] == 20
    assert venta["cliente_nombre"] == "Ana"
    assert venta["cliente_contacto"] == "555-0101"
    assert len(venta["items"]) == 3
    assert all(item["venta_id"] == venta_id for item in venta["items"])
    assert [item["subtotal"] for item in venta["items"]] == [10, 8, 15]
    assert [item["producto_id"] for item in venta["items"]] == [producto_id, None, producto_id]
    assert [item["es_personalizado"] for item in venta["items"]] == [False, True, False]


def test_create_sale_requires_items(client, venta_payload):
    venta_payload["items"] = []
    response = client.post("/ventas", json=venta_payload)
    assert response.status_code == 400
    assert response.json() == {"error": "La venta debe incluir al menos un item"}

    del venta_payload["items"]
    response = client.post("/ventas", json=venta_payload)
    assert response.status_code == 400

    assert client.get("/ventas").json() == []


def test_create_sale_requires_header_and_item_fields(client, venta_payload):
    sin_tipo = dict(venta_payload, tipo="")
    response = client.post("/ventas", json=sin_tipo)
    assert response.status_code == 400
    assert response.json() == {"error": "Faltan campos obligatorios"}

    venta_payload["items"][0].pop("precio_unitario")
    response = client.post("/ventas", json=venta_payload)
    assert response.status_code == 400
    assert response.json() == {"error": "Faltan campos obligatorios"}


def test_create_sale_rejects_zero_quantity(client, venta_payload):
    venta_payload["items"][0]["cantidad"] = 0
    response = client.post("/ventas", json=venta_payload)
    assert response.status_code == 400
    assert response.json() == {"error": "La cantidad debe ser mayor a 0"}


def test_failed_item_insert_rolls_back_whole_sale(client, db_session, venta_payload, monkeypatch):
    original = service._nuevo_item
    llamadas = {"n": 0}

    def _falla_en_segundo(venta_id, item):
        llamadas["n"] += 1
        if llamadas["n"] == 2:
            raise RuntimeError("fallo de escritura")
        return original(venta_id, item)

    monkeypatch.setattr(service, "_nuevo_item", _falla_en_segundo)
    venta_payload["items"].append(dict(venta_payload["items"][0], nombre="Y"))

    response = client.post("/ventas", json=venta_payload)
    assert response.status_code == 500
    assert response.json() == {"error": "No se pudo registrar la venta"}

    assert client.get("/ventas").json() == []
    assert db_session.query(Venta).count() == 0
    assert db_session.query(ItemVenta).count() == 0


def test_list_sales_returns_latest_fifty(client, venta_payload):
    ids = [client.post("/ventas", json=venta_payload).json()["id"] for _ in range(55)]

    response = client.get("/ventas")
    assert response.status_code == 200
    ventas = response.json()
    assert len(ventas) == 50
    assert [v["id"] for v in ventas] == list(reversed(ids))[:50]
    assert "items" not in ventas[0]


def test_get_unknown_sale_is_404(client):
    response = client.get("/ventas/999999")
    assert response.status_code == 404
    assert response.json() == {"error": "Venta no encontrada"}


@pytest.mark.parametrize("valor,esperado", [(2, True), ("si", True), ("x", True), (0, False), ("", False)])
def test_es_personalizado_accepts_any_truthy_value(client, venta_payload, valor, esperado):
    venta_payload["items"][0]["es_personalizado"] = valor
    response = client.post("/ventas", json=venta_payload)
    assert response.status_code == 201

    venta = client.get(f"/ventas/{response.json()['id']}").json()
    assert venta["items"][0]["es_personalizado"] is esperado

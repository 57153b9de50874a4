import pytest
from fastapi.testclient import TestClient

from pos_api.core.security import NoAuthentication
from pos_api.database import Base, get_session_local, refresh_engine
from pos_api.main import create_app


@pytest.fixture
def engine():
    # Base en memoria nueva por test (StaticPool comparte la conexion entre hilos).
    engine = refresh_engine("sqlite://", force=True)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session(engine):
    session = get_session_local()()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def app(engine):
    return create_app(authenticator=NoAuthentication())


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def crear_producto(client):
    def _crear(**overrides):
        payload = {
            "nombre": "Lápiz",
            "codigo_interno_sku": "LP-1",
            "precio_unitario": 5,
        }
        payload.update(overrides)
        response = client.post("/productos", json=payload)
        assert response.status_code == 201, response.json()
        return response.json()["id"]

    return _crear


@pytest.fixture
def venta_payload():
    return {
        "tipo": "mostrador",
        "subtotal": 10,
        "descuento": 0,
        "total": 10,
        "items": [
            {
                "nombre": "X",
                "codigo_interno_sku": "X1",
                "cantidad": 1,
                "precio_unitario": 10,
                "subtotal": 10,
                "es_personalizado": True,
            }
        ],
    }

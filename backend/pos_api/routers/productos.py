from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..core.deps import get_db, require_authenticated
from ..schemas.common import CreadoResponse, MensajeResponse
from ..schemas.productos import (
    BusquedaRequest,
    ExisteResponse,
    ProductoCreate,
    ProductoResponse,
    ProductoUpdate,
    ValidarBarcodeRequest,
    ValidarNombreRequest,
    ValidarSkuRequest,
)
from ..services import productos as service

router = APIRouter(
    prefix="/productos",
    tags=["Productos"],
    dependencies=[Depends(require_authenticated)],
)


# ===========================
#   RUTAS EXACTAS
# ===========================
@router.get("", response_model=List[ProductoResponse])
def list_products(db: Session = Depends(get_db)):
    return service.listar_productos(db)


@router.post("", response_model=CreadoResponse, status_code=status.HTTP_201_CREATED)
def create_product(payload: ProductoCreate, db: Session = Depends(get_db)):
    producto = service.crear_producto(db, payload)
    return {"id": producto.id, "message": "Producto creado"}


@router.post("/search", response_model=List[ProductoResponse])
def search_products(payload: BusquedaRequest, db: Session = Depends(get_db)):
    return service.buscar_productos(db, payload.query)


@router.post("/validate/nombre", response_model=ExisteResponse)
def validate_nombre(payload: ValidarNombreRequest, db: Session = Depends(get_db)):
    return {"exists": service.valor_existe(db, "nombre", payload.nombre, payload.exclude_id)}


@router.post("/validate/sku", response_model=ExisteResponse)
def validate_sku(payload: ValidarSkuRequest, db: Session = Depends(get_db)):
    return {"exists": service.valor_existe(db, "sku", payload.sku, payload.exclude_id)}


@router.post("/validate/barcode", response_model=ExisteResponse)
def validate_barcode(payload: ValidarBarcodeRequest, db: Session = Depends(get_db)):
    return {"exists": service.valor_existe(db, "barcode", payload.barcode, payload.exclude_id)}


# ===========================
#   RUTAS POR ID
# ===========================
@router.get("/{producto_id:int}", response_model=ProductoResponse)
def get_product(producto_id: int, db: Session = Depends(get_db)):
    return service.obtener_producto(db, producto_id)


@router.put("/{producto_id:int}", response_model=MensajeResponse)
def update_product(producto_id: int, payload: ProductoUpdate, db: Session = Depends(get_db)):
    service.actualizar_producto(db, producto_id, payload)
    return {"message": "Producto actualizado"}


@router.delete("/{producto_id:int}", response_model=MensajeResponse)
def delete_product(producto_id: int, db: Session = Depends(get_db)):
    service.eliminar_producto(db, producto_id)
    return {"message": "Producto eliminado"}

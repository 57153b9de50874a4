from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..core.deps import get_db, require_authenticated
from ..schemas.common import CreadoResponse
from ..schemas.ventas import VentaCreate, VentaDetalleResponse, VentaResponse
from ..services import ventas as service

router = APIRouter(
    prefix="/ventas",
    tags=["Ventas"],
    dependencies=[Depends(require_authenticated)],
)


@router.post("", response_model=CreadoResponse, status_code=status.HTTP_201_CREATED)
def create_sale(payload: VentaCreate, db: Session = Depends(get_db)):
    venta = service.crear_venta(db, payload)
    return {"id": venta.id, "message": "Venta registrada"}


@router.get("", response_model=List[VentaResponse])
def list_sales(db: Session = Depends(get_db)):
    return service.listar_ventas(db)


@router.get("/{venta_id:int}", response_model=VentaDetalleResponse)
def get_sale(venta_id: int, db: Session = Depends(get_db)):
    return service.obtener_venta(db, venta_id)

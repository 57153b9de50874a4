from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel


class ItemVentaCreate(BaseModel):
    producto_id: Optional[int] = None
    nombre: Optional[str] = None
    codigo_interno_sku: Optional[str] = None
    cantidad: Optional[float] = None
    precio_unitario: Optional[float] = None
    subtotal: Optional[float] = None
    es_personalizado: Optional[Any] = False


class VentaCreate(BaseModel):
    tipo: Optional[str] = None
    subtotal: Optional[float] = None
    descuento: Optional[float] = 0
    total: Optional[float] = None
    cliente_nombre: Optional[str] = None
    cliente_contacto: Optional[str] = None
    items: Optional[List[ItemVentaCreate]] = None


class ItemVentaResponse(BaseModel):
    id: int
    venta_id: int
    producto_id: Optional[int] = None
    producto_nombre: str
    producto_sku: Optional[str] = None
    cantidad: float
    precio_unitario: float
    subtotal: float
    es_personalizado: bool = False

    class Config:
        from_attributes = True


class VentaResponse(BaseModel):
    id: int
    tipo: str
    subtotal: float
    descuento: float = 0
    total: float
    cliente_nombre: Optional[str] = None
    cliente_contacto: Optional[str] = None
    fecha_creacion: Optional[datetime] = None

    class Config:
        from_attributes = True


class VentaDetalleResponse(VentaResponse):
    items: List[ItemVentaResponse] = []

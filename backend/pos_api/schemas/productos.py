from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


class ProductoBase(BaseModel):
    nombre: Optional[str] = None
    descripcion: Optional[str] = None
    codigo_interno_sku: Optional[str] = None
    codigo_barras: Optional[str] = None
    img: Optional[str] = None
    stock_disponible: Optional[int] = None
    # Cualquier valor truthy habilita el control de stock.
    habilitar_stock: Optional[Any] = False
    precio_unitario: Optional[float] = None


class ProductoCreate(ProductoBase):
    pass


class ProductoUpdate(ProductoBase):
    pass


class ProductoResponse(BaseModel):
    id: int
    nombre: str
    descripcion: Optional[str] = None
    codigo_interno_sku: str
    codigo_barras: Optional[str] = None
    img: Optional[str] = None
    stock_disponible: int = 0
    habilitar_stock: bool = False
    precio_unitario: float
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class BusquedaRequest(BaseModel):
    query: Optional[str] = None


class ValidacionBase(BaseModel):
    exclude_id: Optional[int] = Field(default=None, alias="excludeId")

    class Config:
        populate_by_name = True


class ValidarNombreRequest(ValidacionBase):
    nombre: Optional[str] = None


class ValidarSkuRequest(ValidacionBase):
    sku: Optional[str] = None


class ValidarBarcodeRequest(ValidacionBase):
    barcode: Optional[str] = None


class ExisteResponse(BaseModel):
    exists: bool

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Integer, Numeric, String, Text, UniqueConstraint
from sqlalchemy.sql import func

from ..core.utils import local_now_naive
from ..database import Base


class Producto(Base):
    __tablename__ = "productos"
    __table_args__ = (
        CheckConstraint("precio_unitario > 0", name="ck_productos_precio_positivo"),
        CheckConstraint("stock_disponible >= 0", name="ck_productos_stock_no_negativo"),
        UniqueConstraint("nombre", name="uq_productos_nombre"),
        UniqueConstraint("codigo_interno_sku", name="uq_productos_codigo_interno_sku"),
        # UNIQUE no compara NULLs: varios productos pueden no tener codigo de barras.
        UniqueConstraint("codigo_barras", name="uq_productos_codigo_barras"),
    )

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(160), nullable=False)
    descripcion = Column(Text, nullable=True)
    codigo_interno_sku = Column(String(60), nullable=False)
    codigo_barras = Column(String(60), nullable=True)
    img = Column(Text, nullable=True)
    stock_disponible = Column(Integer, nullable=False, default=0)
    habilitar_stock = Column(Boolean, nullable=False, default=False)
    precio_unitario = Column(Numeric(12, 2), nullable=False)
    created_at = Column(DateTime, default=local_now_naive, server_default=func.now(), index=True)

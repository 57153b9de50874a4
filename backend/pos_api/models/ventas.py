from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..core.utils import local_now_naive
from ..database import Base


class Venta(Base):
    __tablename__ = "ventas"

    id = Column(Integer, primary_key=True, index=True)
    tipo = Column(String(40), nullable=False)
    subtotal = Column(Numeric(14, 2), nullable=False)
    descuento = Column(Numeric(14, 2), nullable=False, default=0)
    total = Column(Numeric(14, 2), nullable=False)
    cliente_nombre = Column(String(160), nullable=True)
    cliente_contacto = Column(String(160), nullable=True)
    fecha_creacion = Column(DateTime, default=local_now_naive, server_default=func.now(), index=True)

    items = relationship(
        "ItemVenta",
        back_populates="venta",
        order_by="ItemVenta.id",
        cascade="all, delete-orphan",
    )


class ItemVenta(Base):
    __tablename__ = "items_ventas"

    id = Column(Integer, primary_key=True, index=True)
    venta_id = Column(Integer, ForeignKey("ventas.id", ondelete="CASCADE"), nullable=False, index=True)
    # Referencia historica al catalogo, sin FK: borrar un producto no toca las ventas.
    producto_id = Column(Integer, nullable=True, index=True)
    producto_nombre = Column(String(160), nullable=False)
    producto_sku = Column(String(60), nullable=True)
    cantidad = Column(Numeric(12, 2), nullable=False)
    precio_unitario = Column(Numeric(12, 2), nullable=False)
    subtotal = Column(Numeric(14, 2), nullable=False)
    es_personalizado = Column(Boolean, nullable=False, default=False)

    venta = relationship("Venta", back_populates="items")

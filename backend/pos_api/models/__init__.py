from .productos import Producto
from .ventas import ItemVenta, Venta

__all__ = ["Producto", "Venta", "ItemVenta"]

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ..config import settings
from ..core.errors import NotFoundError, UnexpectedError, ValidationError
from ..core.utils import blank_to_none
from ..models.ventas import ItemVenta, Venta
from ..schemas.ventas import ItemVentaCreate, VentaCreate

logger = logging.getLogger("pos_api.ventas")

MSG_CAMPOS_FALTANTES = "Faltan campos obligatorios"
MSG_SIN_ITEMS = "La venta debe incluir al menos un item"
MSG_CANTIDAD_INVALIDA = "La cantidad debe ser mayor a 0"
MSG_NO_REGISTRADA = "No se pudo registrar la venta"
MSG_NO_ENCONTRADA = "Venta no encontrada"


def _validar_venta(datos: VentaCreate) -> None:
    if blank_to_none(datos.tipo) is None or datos.subtotal is None or datos.total is None:
        raise ValidationError(MSG_CAMPOS_FALTANTES)
    if not datos.items:
        raise ValidationError(MSG_SIN_ITEMS)

    for item in datos.items:
        if (
            blank_to_none(item.nombre) is None
            or item.cantidad is None
            or item.precio_unitario is None
            or item.subtotal is None
        ):
            raise ValidationError(MSG_CAMPOS_FALTANTES)
        if not item.cantidad > 0:
            raise ValidationError(MSG_CANTIDAD_INVALIDA)


def _nuevo_item(venta_id: int, item: ItemVentaCreate) -> ItemVenta:
    return ItemVenta(
        venta_id=venta_id,
        producto_id=item.producto_id or None,
        producto_nombre=item.nombre,
        producto_sku=blank_to_none(item.codigo_interno_sku),
        cantidad=item.cantidad,
        precio_unitario=item.precio_unitario,
        subtotal=item.subtotal,
        es_personalizado=bool(item.es_personalizado),
    )


def crear_venta(db: Session, datos: VentaCreate) -> Venta:
    """Registra la cabecera y todos sus items en una sola transaccion.

    Los montos se guardan tal como llegan, sin recalcular. Si falla cualquier
    insercion se revierte todo: nunca queda una venta sin sus items.
    """
    _validar_venta(datos)

    venta = Venta(
        tipo=datos.tipo,
        subtotal=datos.subtotal,
        descuento=datos.descuento or 0,
        total=datos.total,
        cliente_nombre=blank_to_none(datos.cliente_nombre),
        cliente_contacto=blank_to_none(datos.cliente_contacto),
    )
    try:
        db.add(venta)
        db.flush()
        for item in datos.items:
            db.add(_nuevo_item(venta.id, item))
        db.commit()
    except Exception as exc:
        db.rollback()
        logger.exception({"event": "venta.rollback", "tipo": datos.tipo, "items": len(datos.items)})
        raise UnexpectedError(MSG_NO_REGISTRADA) from exc

    logger.info({"event": "venta.registrada", "id": venta.id, "items": len(datos.items), "total": datos.total})
    return venta


def listar_ventas(db: Session, limit: Optional[int] = None) -> list[Venta]:
    return (
        db.query(Venta)
        .order_by(Venta.fecha_creacion.desc(), Venta.id.desc())
        .limit(limit or settings.VENTAS_LIST_LIMIT)
        .all()
    )


def obtener_venta(db: Session, venta_id: int) -> Venta:
    venta = db.query(Venta).filter(Venta.id == venta_id).first()
    if not venta:
        raise NotFoundError(MSG_NO_ENCONTRADA)
    return venta

"""Operaciones de catalogo: consultas, validaciones de unicidad y escrituras.

Las validaciones de unicidad se hacen antes de escribir para devolver un 409
que nombra el campo. Las restricciones UNIQUE de la tabla cierran la carrera
entre dos escrituras concurrentes; su violacion se traduce al mismo error.
"""
import logging
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..config import settings
from ..core.errors import ConflictError, NotFoundError, ValidationError
from ..core.utils import blank_to_none
from ..models.productos import Producto
from ..schemas.productos import ProductoBase

logger = logging.getLogger("pos_api.productos")

MSG_CAMPOS_FALTANTES = "Faltan campos obligatorios"
MSG_PRECIO_INVALIDO = "El precio debe ser mayor a 0"
MSG_STOCK_INVALIDO = "El stock no puede ser negativo"
MSG_NO_ENCONTRADO = "Producto no encontrado"

# campo validable -> (columna, mensaje de conflicto); el orden es el de verificacion
CAMPOS_UNICOS = {
    "nombre": ("nombre", "El nombre ya existe"),
    "sku": ("codigo_interno_sku", "El SKU ya existe"),
    "barcode": ("codigo_barras", "El código de barras ya existe"),
}


def listar_productos(db: Session) -> list[Producto]:
    return db.query(Producto).order_by(Producto.created_at.desc(), Producto.id.desc()).all()


def obtener_producto(db: Session, producto_id: int) -> Producto:
    producto = db.query(Producto).filter(Producto.id == producto_id).first()
    if not producto:
        raise NotFoundError(MSG_NO_ENCONTRADO)
    return producto


def buscar_productos(db: Session, query: Optional[str], limit: Optional[int] = None) -> list[Producto]:
    term = query or ""
    return (
        db.query(Producto)
        .filter(
            or_(
                Producto.nombre.contains(term, autoescape=True),
                Producto.descripcion.contains(term, autoescape=True),
                Producto.codigo_interno_sku.contains(term, autoescape=True),
                Producto.codigo_barras.contains(term, autoescape=True),
            )
        )
        .order_by(Producto.id.asc())
        .limit(limit or settings.SEARCH_LIMIT)
        .all()
    )


def valor_existe(db: Session, campo: str, valor: Optional[str], exclude_id: Optional[int] = None) -> bool:
    """True si otro producto (distinto de ``exclude_id``) ya usa ``valor``.

    Un codigo de barras vacio nunca entra en conflicto.
    """
    columna, _ = CAMPOS_UNICOS[campo]
    if campo == "barcode" and not valor:
        return False
    if valor is None:
        return False

    query = db.query(Producto.id).filter(getattr(Producto, columna) == valor)
    if exclude_id:
        query = query.filter(Producto.id != exclude_id)
    return query.first() is not None


def _validar_datos(datos: ProductoBase) -> dict:
    if (
        blank_to_none(datos.nombre) is None
        or blank_to_none(datos.codigo_interno_sku) is None
        or datos.precio_unitario is None
    ):
        raise ValidationError(MSG_CAMPOS_FALTANTES)
    if not datos.precio_unitario > 0:
        raise ValidationError(MSG_PRECIO_INVALIDO)

    stock = datos.stock_disponible or 0
    if stock < 0:
        raise ValidationError(MSG_STOCK_INVALIDO)

    return {
        "nombre": datos.nombre,
        "descripcion": blank_to_none(datos.descripcion),
        "codigo_interno_sku": datos.codigo_interno_sku,
        "codigo_barras": blank_to_none(datos.codigo_barras),
        "img": blank_to_none(datos.img),
        "stock_disponible": stock,
        "habilitar_stock": bool(datos.habilitar_stock),
        "precio_unitario": datos.precio_unitario,
    }


def _verificar_unicos(db: Session, valores: dict, exclude_id: Optional[int] = None) -> None:
    for campo, (columna, mensaje) in CAMPOS_UNICOS.items():
        if valor_existe(db, campo, valores[columna], exclude_id):
            raise ConflictError(mensaje, field=columna)


def _conflicto_desde_integridad(
    db: Session, exc: IntegrityError, valores: dict, exclude_id: Optional[int]
) -> Optional[ConflictError]:
    detalle = str(getattr(exc, "orig", exc))
    for columna, mensaje in CAMPOS_UNICOS.values():
        # sqlite: "productos.nombre"; postgres: nombre de la restriccion
        if f"productos.{columna}" in detalle or f"uq_productos_{columna}" in detalle:
            return ConflictError(mensaje, field=columna)

    for campo, (columna, mensaje) in CAMPOS_UNICOS.items():
        if valor_existe(db, campo, valores[columna], exclude_id):
            return ConflictError(mensaje, field=columna)
    return None


def _confirmar(db: Session, valores: dict, exclude_id: Optional[int] = None) -> None:
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        conflicto = _conflicto_desde_integridad(db, exc, valores, exclude_id)
        if conflicto is None:
            raise
        logger.warning(
            {"event": "producto.conflicto_en_commit", "campo": conflicto.field, "exclude_id": exclude_id}
        )
        raise conflicto from exc


def crear_producto(db: Session, datos: ProductoBase) -> Producto:
    valores = _validar_datos(datos)
    _verificar_unicos(db, valores)

    producto = Producto(**valores)
    db.add(producto)
    _confirmar(db, valores)
    db.refresh(producto)
    logger.info({"event": "producto.creado", "id": producto.id, "sku": producto.codigo_interno_sku})
    return producto


def actualizar_producto(db: Session, producto_id: int, datos: ProductoBase) -> Producto:
    valores = _validar_datos(datos)
    producto = obtener_producto(db, producto_id)
    _verificar_unicos(db, valores, exclude_id=producto.id)

    for key, value in valores.items():
        setattr(producto, key, value)
    _confirmar(db, valores, exclude_id=producto.id)
    db.refresh(producto)
    logger.info({"event": "producto.actualizado", "id": producto.id})
    return producto


def eliminar_producto(db: Session, producto_id: int) -> int:
    eliminados = (
        db.query(Producto)
        .filter(Producto.id == producto_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    logger.info({"event": "producto.eliminado", "id": producto_id, "filas": eliminados})
    return eliminados

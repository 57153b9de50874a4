"""create productos, ventas and items_ventas

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "a1b2c3d4e5f6"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "productos",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("nombre", sa.String(length=160), nullable=False),
        sa.Column("descripcion", sa.Text(), nullable=True),
        sa.Column("codigo_interno_sku", sa.String(length=60), nullable=False),
        sa.Column("codigo_barras", sa.String(length=60), nullable=True),
        sa.Column("img", sa.Text(), nullable=True),
        sa.Column("stock_disponible", sa.Integer(), nullable=False),
        sa.Column("habilitar_stock", sa.Boolean(), nullable=False),
        sa.Column("precio_unitario", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.CheckConstraint("precio_unitario > 0", name="ck_productos_precio_positivo"),
        sa.CheckConstraint("stock_disponible >= 0", name="ck_productos_stock_no_negativo"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("nombre", name="uq_productos_nombre"),
        sa.UniqueConstraint("codigo_interno_sku", name="uq_productos_codigo_interno_sku"),
        sa.UniqueConstraint("codigo_barras", name="uq_productos_codigo_barras"),
    )
    op.create_index(op.f("ix_productos_id"), "productos", ["id"], unique=False)
    op.create_index(op.f("ix_productos_created_at"), "productos", ["created_at"], unique=False)

    op.create_table(
        "ventas",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("tipo", sa.String(length=40), nullable=False),
        sa.Column("subtotal", sa.Numeric(precision=14, scale=2), nullable=False),
        sa.Column("descuento", sa.Numeric(precision=14, scale=2), nullable=False),
        sa.Column("total", sa.Numeric(precision=14, scale=2), nullable=False),
        sa.Column("cliente_nombre", sa.String(length=160), nullable=True),
        sa.Column("cliente_contacto", sa.String(length=160), nullable=True),
        sa.Column("fecha_creacion", sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_ventas_id"), "ventas", ["id"], unique=False)
    op.create_index(op.f("ix_ventas_fecha_creacion"), "ventas", ["fecha_creacion"], unique=False)

    op.create_table(
        "items_ventas",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("venta_id", sa.Integer(), nullable=False),
        sa.Column("producto_id", sa.Integer(), nullable=True),
        sa.Column("producto_nombre", sa.String(length=160), nullable=False),
        sa.Column("producto_sku", sa.String(length=60), nullable=True),
        sa.Column("cantidad", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column("precio_unitario", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column("subtotal", sa.Numeric(precision=14, scale=2), nullable=False),
        sa.Column("es_personalizado", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(["venta_id"], ["ventas.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_items_ventas_id"), "items_ventas", ["id"], unique=False)
    op.create_index(op.f("ix_items_ventas_venta_id"), "items_ventas", ["venta_id"], unique=False)
    op.create_index(op.f("ix_items_ventas_producto_id"), "items_ventas", ["producto_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_items_ventas_producto_id"), table_name="items_ventas")
    op.drop_index(op.f("ix_items_ventas_venta_id"), table_name="items_ventas")
    op.drop_index(op.f("ix_items_ventas_id"), table_name="items_ventas")
    op.drop_table("items_ventas")
    op.drop_index(op.f("ix_ventas_fecha_creacion"), table_name="ventas")
    op.drop_index(op.f("ix_ventas_id"), table_name="ventas")
    op.drop_table("ventas")
    op.drop_index(op.f("ix_productos_created_at"), table_name="productos")
    op.drop_index(op.f("ix_productos_id"), table_name="productos")
    op.drop_table("productos")

import logging

from ..database import Base, get_engine
from ..models import ItemVenta, Producto, Venta  # noqa: F401

logger = logging.getLogger("pos_api.db")


def init_db() -> None:
    engine = get_engine()
    Base.metadata.create_all(bind=engine)
    logger.info({"event": "db.init", "tablas": sorted(Base.metadata.tables)})

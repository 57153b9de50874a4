from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..config import settings


def resolve_timezone(name: str) -> tzinfo:
    """Zona horaria de los sellos de creacion; UTC si no hay tzdata o el nombre es invalido."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return timezone.utc


LOCAL_TZ = resolve_timezone(settings.APP_TIMEZONE)


def local_now_naive() -> datetime:
    # Las columnas DateTime se guardan sin zona, en hora local del negocio.
    return datetime.now(tz=LOCAL_TZ).replace(tzinfo=None)


def blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value

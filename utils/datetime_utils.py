"""
Utilidades para manejo de fechas y zonas horarias.

Las marcas de tiempo se guardan sin zona horaria (naive) en la hora local
configurada, de modo que las comparaciones de expiración y los filtros por
fecha trabajan siempre sobre la misma referencia.
"""
from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo
from config import settings


def get_local_timezone() -> ZoneInfo:
    """
    Obtiene la zona horaria configurada.

    Returns:
        ZoneInfo: Zona horaria de la aplicación.
    """
    return ZoneInfo(settings.timezone)


def get_local_now() -> datetime:
    """
    Obtiene la fecha y hora actual en la zona horaria local configurada.

    Returns:
        datetime: Fecha y hora actual con zona horaria.
    """
    return datetime.now(get_local_timezone())


def local_now_naive() -> datetime:
    """Hora local actual sin tzinfo, tal como se persiste en la base de datos."""
    return get_local_now().replace(tzinfo=None)


def to_naive_local(dt: datetime) -> datetime:
    """
    Convierte un datetime con zona horaria a hora local naive.

    Los valores naive se asumen ya expresados en hora local.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(get_local_timezone()).replace(tzinfo=None)


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """Devuelve el intervalo semiabierto [inicio del día, inicio del día siguiente)."""
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)

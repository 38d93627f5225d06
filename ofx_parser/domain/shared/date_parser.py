"""
Conversión de fechas OFX.

CONTEXTO DEL PROBLEMA:
OFX define las fechas como YYYYMMDD[HHMMSS[.XXX]][gmt offset:tz name]:

    "20201225"                  → solo fecha
    "20201225120000"            → fecha y hora
    "20201225120000.000[-3:BRT]" → con milisegundos y zona horaria

Pero varios bancos brasileños exportan DD/MM/YYYY ("25/12/2020") cuando
la moneda de la cuenta es BRL. El formato se decide por la moneda ya
resuelta del extracto, no por el texto: "01/02/2020" en un extracto USD
no se interpreta como fecha brasileña.

Reglas:
1. Siempre se devuelve `date` si no hay hora y `datetime` si la hay.
2. El sufijo de milisegundos y zona horaria se ignora (fecha local).
3. Se lanzan errores claros cuando no se puede parsear.
"""

import re
from datetime import date, datetime

BRAZILIAN_CURRENCY = "BRL"

_BRAZILIAN_DATE = re.compile(r"(\d{2})/(\d{2})/(\d{4})")
_OFX_DATE = re.compile(r"(\d{4})(\d{2})(\d{2})(?:(\d{2})(\d{2})(\d{2}))?")


def parse_ofx_date(date_text: str, currency: str = "") -> date | datetime:
    """Parsea una fecha de OFX según la moneda del extracto.

    Args:
        date_text: Contenido de DTPOSTED, DTASOF, etc.
        currency: Moneda ya resuelta del extracto (CURDEF). Solo "BRL"
                  habilita el formato DD/MM/YYYY.

    Returns:
        `date` si el texto no trae hora; `datetime` si la trae.

    Raises:
        ValueError: Si el texto no tiene un formato reconocido o la fecha
                    no existe en el calendario (ej: 31 de febrero).

    Ejemplos:
        >>> parse_ofx_date("25/12/2020", "BRL")
        datetime.date(2020, 12, 25)
        >>> parse_ofx_date("20201225120000", "USD")
        datetime.datetime(2020, 12, 25, 12, 0)
        >>> parse_ofx_date("20201225")
        datetime.date(2020, 12, 25)
    """
    text = date_text.strip()

    if not text:
        raise ValueError("El texto de fecha está vacío")

    if currency == BRAZILIAN_CURRENCY:
        m = _BRAZILIAN_DATE.search(text)
        if m:
            day, month, year = (int(g) for g in m.groups())
            return _build_date(year, month, day, text)

    m = _OFX_DATE.search(text)
    if not m:
        raise ValueError(
            f"Formato de fecha no reconocido: '{text}'. "
            f"Formatos soportados: YYYYMMDD, YYYYMMDDHHMMSS"
            + (", DD/MM/YYYY" if currency == BRAZILIAN_CURRENCY else "")
        )

    year, month, day = int(m.group(1)), int(m.group(2)), int(m.group(3))
    if m.group(4) is None:
        return _build_date(year, month, day, text)

    hour, minute, second = int(m.group(4)), int(m.group(5)), int(m.group(6))
    try:
        return datetime(year, month, day, hour, minute, second)
    except ValueError as e:
        raise ValueError(f"Fecha inválida construida de '{text}': {e}")


def parse_ofx_date_safe(date_text: str, currency: str = "") -> date | datetime | None:
    """Versión "segura" de parse_ofx_date que retorna None ante errores.

    Solo para fechas de saldo (DTASOF): una fecha de saldo ausente o
    inválida no debe abortar todo el parseo.
    """
    try:
        return parse_ofx_date(date_text, currency)
    except ValueError:
        return None


def _build_date(year: int, month: int, day: int, original_text: str) -> date:
    try:
        return date(year, month, day)
    except ValueError as e:
        raise ValueError(
            f"Fecha inválida construida de '{original_text}': "
            f"año={year}, mes={month}, día={day} ({e})"
        )

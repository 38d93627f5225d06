"""
Parser del bloque de encabezados OFX 1.0.2.

Un OFX SGML empieza con líneas `CLAVE:VALOR` antes de la etiqueta <OFX>:

    OFXHEADER:100
    DATA:OFXSGML
    VERSION:102
    SECURITY:NONE
    ENCODING:USASCII

Reglas:
- Algunos bancos terminan las líneas con \\r solo; se normalizan a \\n.
- Las líneas que no tienen la forma `clave:valor` se ignoran (no es error).
- El valor literal NONE se guarda como None, no como el texto "NONE".
- Si no se pudo leer ninguna línea, el resultado es None (no un dict vacío),
  para que el llamador distinga "sin encabezados" de "cero encabezados".
"""

import re
from collections.abc import Mapping
from types import MappingProxyType

from ofx_parser.domain.shared.text_cleaner import normalize_line_endings

NONE_VALUE = "NONE"

_HEADER_LINE = re.compile(r"^(.*?):(.*?)\s*$")


def parse_headers(header_text: str) -> Mapping[str, str | None] | None:
    """Convierte el bloque de encabezados en un mapeo ordenado de solo lectura.

    Args:
        header_text: Texto previo a la etiqueta <OFX>.

    Returns:
        Mapeo clave → valor (None cuando el valor es NONE), en el orden del
        archivo. None si ninguna línea tiene la forma `clave:valor`.

    Ejemplos:
        >>> dict(parse_headers("VERSION:102\\rSECURITY:NONE\\r"))
        {'VERSION': '102', 'SECURITY': None}
        >>> parse_headers("basura sin dos puntos") is None
        True
    """
    headers: dict[str, str | None] = {}

    for line in normalize_line_endings(header_text).splitlines():
        m = _HEADER_LINE.match(line)
        if not m:
            continue
        key, value = m.group(1), m.group(2)
        headers[key] = None if value == NONE_VALUE else value

    if not headers:
        return None
    return MappingProxyType(headers)

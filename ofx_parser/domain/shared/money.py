"""
Utilidades para manejo de montos monetarios en OFX.

CONTEXTO DEL PROBLEMA:
El estándar OFX dice que TRNAMT y BALAMT usan punto decimal, pero
los bancos exportan lo que quieren:

- Bancos de EE.UU.:        "1,234.56"   (coma = miles, punto = decimal)
- Bancos brasileños:       "1.234,56"   (punto = miles, coma = decimal)
- Con símbolo:             "R$ 1.234,56", "$1,234.56"
- Nubank:                  ".-50"       (signo menos después del punto)
- Citibank (BANKID 5467):  "10000"      (montos ya multiplicados por 100)

SOLUCIÓN:
Un sanitizador con pasos EN ORDEN. Cada paso asume la salida del
anterior; si se reordenan, los arreglos de Nubank y Citibank se rompen.
Siempre se trabaja con Decimal, nunca con float.
"""

import re
from decimal import Decimal, InvalidOperation

CITIBANK_BANK_ID = "5467"
"""BANKID de Citibank: reporta los montos multiplicados por 100."""

_NON_NUMERIC = re.compile(r"[^\d,.\-]")
_COMMA_THOUSANDS = re.compile(r"\d,\d{3}")


def sanitize_currency(text: str, bank_id: str = "") -> str:
    """Limpia un monto crudo de OFX y lo deja listo para Decimal().

    Pasos (el orden es parte del contrato):
    1. Quitar todo lo que no sea dígito, coma, punto o guion.
    2. Decidir el separador decimal: si hay "dígito, coma, 3 dígitos" la
       coma es de miles y se elimina; si no, la coma es el decimal, los
       puntos de miles se eliminan y la coma pasa a punto.
    3. Arreglar el formato ".-50" de Nubank moviendo el signo al inicio.
    4. Si el banco es Citibank, dividir entre 100.

    Args:
        text: Monto tal como aparece en el OFX.
        bank_id: BANKID de la cuenta (para el caso Citibank).

    Returns:
        String numérico con punto decimal. Cadena vacía si el texto no
        tenía ningún carácter numérico.

    Raises:
        ValueError: Solo en el paso 4, si el valor no es numérico.

    Ejemplos:
        >>> sanitize_currency("1,234.56")
        '1234.56'
        >>> sanitize_currency("R$ 1.234,56")
        '1234.56'
        >>> sanitize_currency(".-50")
        '-50'
        >>> sanitize_currency("10.-50")
        '-10.50'
        >>> sanitize_currency("100", bank_id="5467")
        '1'
    """
    cleaned = _NON_NUMERIC.sub("", text)

    if _COMMA_THOUSANDS.search(cleaned):
        cleaned = cleaned.replace(",", "")
    elif "," in cleaned:
        cleaned = cleaned.replace(".", "").replace(",", ".")

    if ".-" in cleaned:
        cleaned = "-" + cleaned.replace("-", "")
        # Sin parte entera el punto tampoco es decimal: ".-50" es -50.
        if cleaned.startswith("-."):
            cleaned = "-" + cleaned[2:]

    if cleaned and bank_id == CITIBANK_BANK_ID:
        cleaned = str(_to_decimal(cleaned, text) / 100)

    return cleaned


def parse_amount(text: str, bank_id: str = "") -> Decimal:
    """Convierte un monto crudo de OFX a Decimal (versión estricta).

    Se usa para TRNAMT: un monto de transacción inválido NO puede
    convertirse en 0 sin corromper los totales.

    Raises:
        ValueError: Si después de sanitizar no queda un número válido.
                    El mensaje incluye el valor original para debugging.

    Ejemplos:
        >>> parse_amount("-1.234,56")
        Decimal('-1234.56')
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_amount espera str, recibió {type(text).__name__}")
    if not text.strip():
        raise ValueError("El texto del monto está vacío")

    cleaned = sanitize_currency(text, bank_id)
    if not cleaned or cleaned in ("-", ".", "-."):
        raise ValueError(f"No se pudo extraer un monto de: '{text}'")

    return _to_decimal(cleaned, text)


def parse_amount_safe(text: str, bank_id: str = "") -> Decimal:
    """Versión "segura" de parse_amount que retorna Decimal("0") ante errores.

    ¿Cuándo usarla? Para BALAMT: un saldo ausente se reporta como 0,
    igual que el resto de lectores OFX.

    Ejemplos:
        >>> parse_amount_safe("")
        Decimal('0')
        >>> parse_amount_safe("1,234.56")
        Decimal('1234.56')
    """
    if not text or not text.strip():
        return Decimal("0")

    try:
        return parse_amount(text, bank_id)
    except ValueError:
        return Decimal("0")


def to_pennies(amount: Decimal) -> int:
    """Monto en unidades menores (centavos), truncado hacia cero.

    Ejemplos:
        >>> to_pennies(Decimal("12.349"))
        1234
        >>> to_pennies(Decimal("-0.015"))
        -1
    """
    return int(amount * 100)


def _to_decimal(cleaned: str, original: str) -> Decimal:
    try:
        return Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"No se pudo convertir a monto: '{original}' (limpio: '{cleaned}')")

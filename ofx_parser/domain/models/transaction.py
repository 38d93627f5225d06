"""
Modelo de dominio: Transacción de un extracto OFX (STMTTRN).

Decisiones de diseño:
- Se usa `Decimal` para el monto porque `float` tiene errores de redondeo
  con dinero; amount_in_pennies se deriva del Decimal ya normalizado.
- El signo del monto viene del banco: negativo = débito, positivo = crédito.
- fit_id debería ser único dentro de la cuenta, pero eso es una
  propiedad del documento que el parser no verifica.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from ofx_parser.domain.shared.money import to_pennies


class TransactionType(Enum):
    """Clasificación de la transacción (TRNTYPE)."""

    ATM = "atm"
    CASH = "cash"
    CHECK = "check"
    CREDIT = "credit"
    DEBIT = "debit"
    DEPOSIT = "deposit"
    DIRECTDEBIT = "directdebit"
    DIRECTDEPOSIT = "directdeposit"
    DIVIDEND = "dividend"
    FEE = "fee"
    INTEREST = "interest"
    OTHER = "other"
    PAYMENT = "payment"
    POINT_OF_SALE = "point_of_sale"
    REPEAT_PAYMENT = "repeat_payment"
    SERVICE_CHARGE = "service_charge"
    TRANSFER = "transfer"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Transaction:
    """Una transacción individual, en el orden en que aparece en el documento."""

    amount: Decimal
    """Monto con signo (TRNAMT normalizado)."""

    fit_id: str
    """Identificador de la transacción asignado por el banco (FITID)."""

    posted_at: date | datetime
    """Fecha de registro (DTPOSTED). `datetime` si el banco envía la hora."""

    type: TransactionType = TransactionType.UNKNOWN
    """Tipo de transacción. UNKNOWN si el código no es uno de OFX 1.0.2."""

    memo: str = ""
    name: str = ""
    payee: str = ""

    check_number: str = ""
    """Número de cheque (CHECKNUM). Vacío si no aplica."""

    ref_number: str = ""
    """Número de referencia (REFNUM). Vacío si no aplica."""

    sic: str = ""
    """Standard Industrial Code del comercio."""

    @property
    def amount_in_pennies(self) -> int:
        """Monto en centavos, truncado hacia cero."""
        return to_pennies(self.amount)

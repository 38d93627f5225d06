"""
Modelo de dominio: Cuenta bancaria o de tarjeta de crédito.

Reúne la identidad de la cuenta, sus saldos y sus transacciones. Es el
resultado principal del parseo de un extracto OFX.
"""

from dataclasses import dataclass, field
from enum import Enum

from ofx_parser.domain.models.balance import Balance
from ofx_parser.domain.models.transaction import Transaction


class AccountType(Enum):
    """Tipo de cuenta (ACCTTYPE). Hoy solo se reconoce CHECKING."""

    CHECKING = "checking"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Account:
    """Cuenta con sus saldos y transacciones."""

    bank_id: str
    """BANKID. Vacío en cuentas de tarjeta de crédito (CCACCTFROM)."""

    id: str
    """Número de cuenta (ACCTID). Se guarda como string porque puede
    tener ceros iniciales y guiones."""

    type: AccountType
    """Tipo de cuenta. UNKNOWN si el código no se reconoce."""

    currency: str
    """Moneda del extracto (CURDEF). Vacía si el banco no la envía."""

    balance: Balance
    """Saldo contable (LEDGERBAL)."""

    available_balance: Balance | None = None
    """Saldo disponible (AVAILBAL). None si el elemento no existe."""

    transactions: tuple[Transaction, ...] = field(default_factory=tuple)
    """Transacciones en el orden del documento."""

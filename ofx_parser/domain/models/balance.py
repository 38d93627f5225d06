"""
Modelo de dominio: Saldo de la cuenta.

Un extracto OFX trae hasta dos saldos:
- LEDGERBAL: saldo contable a la fecha del extracto (siempre se intenta).
- AVAILBAL: saldo disponible, con retenciones/autorizaciones pendientes.
  Solo existe si el banco lo reporta.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from ofx_parser.domain.shared.money import to_pennies


@dataclass(frozen=True)
class Balance:
    """Saldo de la cuenta a una fecha dada."""

    amount: Decimal
    """Monto con signo, ya normalizado (sin separadores de miles)."""

    posted_at: date | datetime | None = None
    """Fecha del saldo (DTASOF). None si no venía o no se pudo parsear:
    una fecha de saldo inválida no aborta el parseo del extracto."""

    @property
    def amount_in_pennies(self) -> int:
        """Monto en centavos, truncado hacia cero.

        ¿Por qué propiedad y no campo? Porque se deriva de amount; guardarlo
        aparte permitiría construir un saldo con ambos valores en desacuerdo.
        """
        return to_pennies(self.amount)

"""
Modelo de dominio: Resultado completo del parseo de un archivo OFX.

Este es el objeto que fluye por la parte "de aplicación":
- Lo PRODUCE el StatementProcessor.
- Lo CONSUME el OutputWriter (Excel).
- Lo REGISTRA el ProcessLogger.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from ofx_parser.domain.models.account import Account
from ofx_parser.domain.models.sign_on import SignOn


@dataclass(frozen=True)
class ParsedStatement:
    """Encabezados, inicio de sesión y cuenta de un documento OFX."""

    headers: Mapping[str, str | None]
    """Encabezados del documento (VERSION, ENCODING, CHARSET...)."""

    sign_on: SignOn
    account: Account

    file_name: str = ""
    """Nombre del archivo original. Vacío si se parseó desde texto."""

    @property
    def version(self) -> str:
        return self.headers.get("VERSION") or ""

    @property
    def transaction_count(self) -> int:
        return len(self.account.transactions)

    @property
    def total_amount(self) -> Decimal:
        """Suma con signo de todas las transacciones (créditos - débitos)."""
        return sum((t.amount for t in self.account.transactions), Decimal("0"))

    @property
    def period(self) -> tuple[date, date] | None:
        """Primera y última fecha de transacción, o None si no hay.

        Las fechas con hora se reducen a `date` para poder compararlas
        con las que no la traen.
        """
        if not self.account.transactions:
            return None
        fechas = [_as_date(t.posted_at) for t in self.account.transactions]
        return min(fechas), max(fechas)


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value

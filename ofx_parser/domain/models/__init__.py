"""
Modelos de dominio del proyecto ofx-parser.

Todos los modelos son dataclasses inmutables (frozen=True) que representan
los datos del negocio sin dependencias externas.

Uso:
    from ofx_parser.domain.models import Account, Transaction, ParsedStatement
"""

from ofx_parser.domain.models.account import Account, AccountType
from ofx_parser.domain.models.balance import Balance
from ofx_parser.domain.models.parsed_statement import ParsedStatement
from ofx_parser.domain.models.raw_document import RawDocument
from ofx_parser.domain.models.sign_on import SignOn
from ofx_parser.domain.models.transaction import Transaction, TransactionType

__all__ = [
    "Account",
    "AccountType",
    "Balance",
    "ParsedStatement",
    "RawDocument",
    "SignOn",
    "Transaction",
    "TransactionType",
]

"""
Mapeo de códigos OFX a los tipos de cuenta y de transacción del dominio.

ACCTTYPE y TRNTYPE son listas cerradas en OFX 1.0.2, pero los bancos
los escriben con mayúsculas/minúsculas inconsistentes ("checking",
"Checking") y a veces inventan códigos propios ("WIRE"). Un código
desconocido NO es un error: se mapea a UNKNOWN y el parseo continúa.

El lookup siempre es case-insensitive (se normaliza a mayúsculas).
"""

from ofx_parser.domain.models.account import AccountType
from ofx_parser.domain.models.transaction import TransactionType

_ACCOUNT_TYPES: dict[str, AccountType] = {
    "CHECKING": AccountType.CHECKING,
}

# Código OFX (TRNTYPE) → tipo de dominio.
_TRANSACTION_TYPES: dict[str, TransactionType] = {
    "ATM": TransactionType.ATM,
    "CASH": TransactionType.CASH,
    "CHECK": TransactionType.CHECK,
    "CREDIT": TransactionType.CREDIT,
    "DEBIT": TransactionType.DEBIT,
    "DEP": TransactionType.DEPOSIT,
    "DIRECTDEBIT": TransactionType.DIRECTDEBIT,
    "DIRECTDEP": TransactionType.DIRECTDEPOSIT,
    "DIV": TransactionType.DIVIDEND,
    "FEE": TransactionType.FEE,
    "INT": TransactionType.INTEREST,
    "OTHER": TransactionType.OTHER,
    "PAYMENT": TransactionType.PAYMENT,
    "POS": TransactionType.POINT_OF_SALE,
    "REPEATPMT": TransactionType.REPEAT_PAYMENT,
    "SRVCHG": TransactionType.SERVICE_CHARGE,
    "XFER": TransactionType.TRANSFER,
}


def to_account_type(code: str) -> AccountType:
    """Convierte un ACCTTYPE de OFX al tipo de cuenta del dominio.

    Ejemplos:
        >>> to_account_type("checking")
        <AccountType.CHECKING: 'checking'>
        >>> to_account_type("SAVINGS")
        <AccountType.UNKNOWN: 'unknown'>
    """
    return _ACCOUNT_TYPES.get(code.strip().upper(), AccountType.UNKNOWN)


def to_transaction_type(code: str) -> TransactionType:
    """Convierte un TRNTYPE de OFX al tipo de transacción del dominio.

    Ejemplos:
        >>> to_transaction_type("dep")
        <TransactionType.DEPOSIT: 'deposit'>
        >>> to_transaction_type("WIRE")
        <TransactionType.UNKNOWN: 'unknown'>
    """
    return _TRANSACTION_TYPES.get(code.strip().upper(), TransactionType.UNKNOWN)

"""
Servicio de dominio: Parser de documentos OFX 1.0.2.

Arma los objetos Account y SignOn consultando el árbol de etiquetas
(TagTree) y pasando cada valor por los normalizadores de `shared`.

LÓGICA DE PARSEO:
1. La moneda (CURDEF) se resuelve ANTES que cualquier monto o fecha,
   porque decide el formato de fecha (BRL habilita DD/MM/YYYY).
2. El BANKID se resuelve antes que cualquier monto, porque Citibank
   (5467) reporta los montos multiplicados por 100.
3. El saldo contable siempre se construye; el disponible solo si existe
   el elemento AVAILBAL.
4. Una fecha de saldo inválida se convierte en None. Un monto o fecha de
   transacción inválidos lanzan ParseError: no se pueden reemplazar sin
   corromper los totales.

Cada agregado se calcula una sola vez por instancia (cached_property).
Dos instancias nunca comparten resultados.
"""

from collections.abc import Mapping
from functools import cached_property

from ofx_parser.domain.exceptions import ParseError
from ofx_parser.domain.models.account import Account
from ofx_parser.domain.models.balance import Balance
from ofx_parser.domain.models.sign_on import SignOn
from ofx_parser.domain.models.transaction import Transaction
from ofx_parser.domain.ports.tag_tree import TagTree
from ofx_parser.domain.shared.date_parser import parse_ofx_date, parse_ofx_date_safe
from ofx_parser.domain.shared.header_parser import parse_headers
from ofx_parser.domain.shared.money import parse_amount, parse_amount_safe
from ofx_parser.domain.shared.type_map import to_account_type, to_transaction_type


class Ofx102Parser:
    """Parser de un documento OFX 1.0.2 (SGML).

    Recibe los encabezados ya parseados y el árbol del cuerpo. No lee
    archivos: eso es trabajo del DocumentReader.
    """

    VERSION = "102"

    # --- Selectores (caminos de etiquetas, case-insensitive) ---

    CURRENCY = (
        "bankmsgsrsv1 > stmttrnrs > stmtrs > curdef, "
        "creditcardmsgsrsv1 > ccstmttrnrs > ccstmtrs > curdef"
    )
    BANK_ID = "bankacctfrom > bankid"
    ACCOUNT_ID = "bankacctfrom > acctid, ccacctfrom > acctid"
    ACCOUNT_TYPE = "bankacctfrom > accttype"

    LANGUAGE = "signonmsgsrsv1 > sonrs > language"
    FI_ID = "signonmsgsrsv1 > sonrs > fi > fid"
    FI_NAME = "signonmsgsrsv1 > sonrs > fi > org"

    TRANSACTIONS = "banktranlist > stmttrn"

    LEDGER_BALANCE = "ledgerbal"
    AVAILABLE_BALANCE = "availbal"

    parse_headers = staticmethod(parse_headers)

    def __init__(self, headers: Mapping[str, str | None] | None, tree: TagTree) -> None:
        """
        Args:
            headers: Encabezados del documento (None si no había).
            tree: Árbol del cuerpo SGML, construido por un TagTreeBuilder.
        """
        self.headers = headers
        self.tree = tree

    # =================================================================
    # AGREGADOS (se calculan una vez por instancia)
    # =================================================================

    @cached_property
    def account(self) -> Account:
        return Account(
            bank_id=self.bank_id,
            id=self.tree.text(self.ACCOUNT_ID),
            type=to_account_type(self.tree.text(self.ACCOUNT_TYPE)),
            currency=self.currency,
            balance=self.balance,
            available_balance=self.available_balance,
            transactions=self.transactions,
        )

    @cached_property
    def sign_on(self) -> SignOn:
        return SignOn(
            language=self.tree.text(self.LANGUAGE),
            fi_id=self.tree.text(self.FI_ID),
            fi_name=self.tree.text(self.FI_NAME),
        )

    @cached_property
    def currency(self) -> str:
        """CURDEF del extracto bancario o de tarjeta (solo uno existe).

        Vacío si no viene, lo que fuerza el formato de fecha no brasileño.
        """
        return self.tree.text(self.CURRENCY)

    @cached_property
    def bank_id(self) -> str:
        return self.tree.text(self.BANK_ID)

    @cached_property
    def balance(self) -> Balance:
        """Saldo contable (LEDGERBAL). Siempre se construye."""
        return self._build_balance(self.LEDGER_BALANCE)

    @cached_property
    def available_balance(self) -> Balance | None:
        """Saldo disponible (AVAILBAL), o None si el elemento no existe.

        Ausente es distinto de cero: no se inventa un saldo de 0.
        """
        if not self.tree.exists(self.AVAILABLE_BALANCE):
            return None
        return self._build_balance(self.AVAILABLE_BALANCE)

    @cached_property
    def transactions(self) -> tuple[Transaction, ...]:
        """Transacciones en el orden del documento.

        Raises:
            ParseError: Si el monto o la fecha de alguna no se puede normalizar.
        """
        return tuple(self._build_transaction(el) for el in self.tree.select(self.TRANSACTIONS))

    # =================================================================
    # CONSTRUCCIÓN
    # =================================================================

    def _build_balance(self, element: str) -> Balance:
        amount = parse_amount_safe(self.tree.text(f"{element} > balamt"), self.bank_id)
        posted_at = parse_ofx_date_safe(self.tree.text(f"{element} > dtasof"), self.currency)
        return Balance(amount=amount, posted_at=posted_at)

    def _build_transaction(self, element: TagTree) -> Transaction:
        fit_id = element.text("fitid")

        raw_amount = element.text("trnamt")
        try:
            amount = parse_amount(raw_amount, self.bank_id)
        except ValueError as e:
            raise ParseError("TRNAMT", raw_amount, str(e), fit_id=fit_id) from e

        raw_date = element.text("dtposted")
        try:
            posted_at = parse_ofx_date(raw_date, self.currency)
        except ValueError as e:
            raise ParseError("DTPOSTED", raw_date, str(e), fit_id=fit_id) from e

        return Transaction(
            amount=amount,
            fit_id=fit_id,
            posted_at=posted_at,
            type=to_transaction_type(element.text("trntype")),
            memo=element.text("memo"),
            name=element.text("name"),
            payee=element.text("payee"),
            check_number=element.text("checknum"),
            ref_number=element.text("refnum"),
            sic=element.text("sic"),
        )

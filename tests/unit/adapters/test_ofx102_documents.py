"""
Tests de Ofx102Parser sobre documentos OFX completos.

A diferencia de tests/unit/domain/test_ofx102_parser.py, aquí el árbol lo
construye BeautifulSoup a partir del SGML real, así que se ejercita el
camino completo: encabezados → árbol → normalizadores → dominio.

Documentos simulados:
- US_CHECKING:   banco de EE.UU., cuenta corriente, USD, AVAILBAL presente.
- NUBANK_CARD:   tarjeta de crédito brasileña, BRL, fechas DD/MM/YYYY,
                 montos "1.234,56" y ".-50", fecha de saldo inválida.
- CITIBANK:      BANKID 5467, montos multiplicados por 100.
"""

from datetime import date, datetime
from decimal import Decimal

import pytest

from ofx_parser.adapters.input.readers.ofx_file_reader import OfxFileReader
from ofx_parser.adapters.input.tag_trees.soup_tag_tree import SoupTagTree
from ofx_parser.domain.exceptions import ParseError
from ofx_parser.domain.models.account import AccountType
from ofx_parser.domain.models.transaction import TransactionType
from ofx_parser.domain.services.ofx102_parser import Ofx102Parser

US_CHECKING = """OFXHEADER:100
DATA:OFXSGML
VERSION:102
SECURITY:NONE
ENCODING:USASCII
CHARSET:1252
COMPRESSION:NONE
OLDFILEUID:NONE
NEWFILEUID:NONE

<OFX>
<SIGNONMSGSRSV1>
<SONRS>
<STATUS>
<CODE>0
<SEVERITY>INFO
</STATUS>
<DTSERVER>20210105120000[-5:EST]
<LANGUAGE>ENG
<FI>
<ORG>Example Bank
<FID>1234
</FI>
</SONRS>
</SIGNONMSGSRSV1>
<BANKMSGSRSV1>
<STMTTRNRS>
<TRNUID>1001
<STATUS>
<CODE>0
<SEVERITY>INFO
</STATUS>
<STMTRS>
<CURDEF>USD
<BANKACCTFROM>
<BANKID>121000248
<ACCTID>0012345678
<ACCTTYPE>CHECKING
</BANKACCTFROM>
<BANKTRANLIST>
<DTSTART>20201201
<DTEND>20201231
<STMTTRN>
<TRNTYPE>DEBIT
<DTPOSTED>20201225120000[-5:EST]
<TRNAMT>-1,234.56
<FITID>20201225001
<CHECKNUM>1044
<REFNUM>R-77
<NAME>RENT PAYMENT
<MEMO>December rent
<SIC>6513
</STMTTRN>
<STMTTRN>
<TRNTYPE>DEP
<DTPOSTED>20201228
<TRNAMT>2500.00
<FITID>20201228001
<NAME>PAYROLL
</STMTTRN>
<STMTTRN>
<TRNTYPE>WIRE
<DTPOSTED>20201230
<TRNAMT>-15.00
<FITID>20201230001
<NAME>OUTGOING WIRE FEE
</STMTTRN>
</BANKTRANLIST>
<LEDGERBAL>
<BALAMT>5,000.25
<DTASOF>20201231
</LEDGERBAL>
<AVAILBAL>
<BALAMT>4,800.00
<DTASOF>20201231120000
</AVAILBAL>
</STMTRS>
</STMTTRNRS>
</BANKMSGSRSV1>
</OFX>
"""

NUBANK_CARD = (
    "OFXHEADER:100\r"
    "DATA:OFXSGML\r"
    "VERSION:102\r"
    "SECURITY:NONE\r"
    "ENCODING:USASCII\r"
    "\r"
    "<OFX>\r"
    "<SIGNONMSGSRSV1><SONRS><STATUS><CODE>0<SEVERITY>INFO</STATUS>"
    "<DTSERVER>20201231<LANGUAGE>POR<FI><ORG>NU PAGAMENTOS S.A.<FID>260</FI>"
    "</SONRS></SIGNONMSGSRSV1>\r"
    "<CREDITCARDMSGSRSV1><CCSTMTTRNRS><TRNUID>1<STATUS><CODE>0<SEVERITY>INFO</STATUS>\r"
    "<CCSTMTRS><CURDEF>BRL<CCACCTFROM><ACCTID>abc-123</CCACCTFROM>\r"
    "<BANKTRANLIST><DTSTART>01/12/2020<DTEND>31/12/2020\r"
    "<STMTTRN><TRNTYPE>DEBIT<DTPOSTED>25/12/2020<TRNAMT>-1.234,56<FITID>nu-1"
    "<MEMO>Supermercado São Jorge</STMTTRN>\r"
    "<STMTTRN><TRNTYPE>CREDIT<DTPOSTED>26/12/2020<TRNAMT>.-50<FITID>nu-2"
    "<MEMO>Estorno</STMTTRN>\r"
    "</BANKTRANLIST>\r"
    "<LEDGERBAL><BALAMT>-1.284,56<DTASOF>data inválida</LEDGERBAL>\r"
    "</CCSTMTRS></CCSTMTTRNRS></CREDITCARDMSGSRSV1></OFX>\r"
)

CITIBANK = """OFXHEADER:100
VERSION:102

<OFX>
<BANKMSGSRSV1><STMTTRNRS><STMTRS>
<CURDEF>USD
<BANKACCTFROM><BANKID>5467<ACCTID>777<ACCTTYPE>SAVINGS</BANKACCTFROM>
<BANKTRANLIST>
<STMTTRN><TRNTYPE>POS<DTPOSTED>20210110<TRNAMT>-12345<FITID>c-1</STMTTRN>
<STMTTRN><TRNTYPE>INT<DTPOSTED>20210131<TRNAMT>7<FITID>c-2</STMTTRN>
</BANKTRANLIST>
<LEDGERBAL><BALAMT>100000<DTASOF>20210131</LEDGERBAL>
<AVAILBAL><BALAMT>99000<DTASOF>20210131</AVAILBAL>
</STMTRS></STMTTRNRS></BANKMSGSRSV1>
</OFX>
"""


def _parse(content: str) -> Ofx102Parser:
    document = OfxFileReader().split(content)
    headers = Ofx102Parser.parse_headers(document.header_text)
    return Ofx102Parser(headers, SoupTagTree.from_body(document.body))


class TestUsChecking:
    @pytest.fixture
    def parser(self):
        return _parse(US_CHECKING)

    def test_headers(self, parser):
        assert parser.headers["VERSION"] == "102"
        assert parser.headers["SECURITY"] is None

    def test_sign_on(self, parser):
        assert parser.sign_on.language == "ENG"
        assert parser.sign_on.fi_id == "1234"
        assert parser.sign_on.fi_name == "Example Bank"

    def test_account(self, parser):
        account = parser.account
        assert account.bank_id == "121000248"
        assert account.id == "0012345678"
        assert account.type is AccountType.CHECKING
        assert account.currency == "USD"

    def test_balances(self, parser):
        assert parser.account.balance.amount == Decimal("5000.25")
        assert parser.account.balance.posted_at == date(2020, 12, 31)
        assert parser.account.available_balance.amount == Decimal("4800.00")
        assert parser.account.available_balance.posted_at == datetime(2020, 12, 31, 12, 0)

    def test_transactions(self, parser):
        txs = parser.account.transactions
        assert [t.fit_id for t in txs] == ["20201225001", "20201228001", "20201230001"]
        assert [t.type for t in txs] == [
            TransactionType.DEBIT,
            TransactionType.DEPOSIT,
            TransactionType.UNKNOWN,
        ]

    def test_primera_transaccion(self, parser):
        tx = parser.account.transactions[0]
        assert tx.amount == Decimal("-1234.56")
        assert tx.amount_in_pennies == -123456
        assert tx.posted_at == datetime(2020, 12, 25, 12, 0, 0)
        assert tx.check_number == "1044"
        assert tx.ref_number == "R-77"
        assert tx.name == "RENT PAYMENT"
        assert tx.memo == "December rent"
        assert tx.sic == "6513"

    def test_centavos_consistentes(self, parser):
        for tx in parser.account.transactions:
            assert tx.amount_in_pennies == int(tx.amount * 100)

    def test_memoizacion(self, parser):
        assert parser.account is parser.account
        assert parser.sign_on is parser.sign_on

    def test_branchid_vacio_no_anida_la_cuenta(self):
        parser = _parse(US_CHECKING.replace("<BANKID>121000248", "<BANKID>121000248\n<BRANCHID>"))
        assert parser.account.id == "0012345678"
        assert parser.account.type is AccountType.CHECKING

    def test_mayor_que_en_el_memo(self):
        parser = _parse(US_CHECKING.replace("<MEMO>December rent", "<MEMO>Rent > December"))
        assert parser.account.transactions[0].memo == "Rent > December"


class TestNubankCard:
    @pytest.fixture
    def parser(self):
        return _parse(NUBANK_CARD)

    def test_headers_con_cr_sueltos(self, parser):
        assert parser.headers["DATA"] == "OFXSGML"
        assert parser.headers["SECURITY"] is None

    def test_account_de_tarjeta(self, parser):
        account = parser.account
        assert account.id == "abc-123"
        assert account.bank_id == ""
        assert account.type is AccountType.UNKNOWN
        assert account.currency == "BRL"

    def test_sign_on(self, parser):
        assert parser.sign_on.language == "POR"
        assert parser.sign_on.fi_name == "NU PAGAMENTOS S.A."

    def test_transacciones_brasilenas(self, parser):
        compra, estorno = parser.account.transactions
        assert compra.amount == Decimal("-1234.56")
        assert compra.posted_at == date(2020, 12, 25)
        assert compra.memo == "Supermercado São Jorge"
        assert estorno.amount == Decimal("-50")
        assert estorno.posted_at == date(2020, 12, 26)

    def test_signo_despues_del_punto_con_parte_entera(self):
        parser = _parse(NUBANK_CARD.replace("<TRNAMT>.-50", "<TRNAMT>10.-50"))
        estorno = parser.account.transactions[1]
        assert estorno.amount == Decimal("-10.50")
        assert estorno.amount_in_pennies == -1050

    def test_saldo_con_fecha_invalida(self, parser):
        balance = parser.account.balance
        assert balance.amount == Decimal("-1284.56")
        assert balance.amount_in_pennies == -128456
        assert balance.posted_at is None

    def test_sin_saldo_disponible(self, parser):
        assert parser.account.available_balance is None


class TestCitibank:
    @pytest.fixture
    def parser(self):
        return _parse(CITIBANK)

    def test_montos_divididos_entre_100(self, parser):
        pos, interes = parser.account.transactions
        assert pos.amount == Decimal("-123.45")
        assert pos.type is TransactionType.POINT_OF_SALE
        assert interes.amount == Decimal("0.07")
        assert interes.amount_in_pennies == 7
        assert interes.type is TransactionType.INTEREST

    def test_saldos_divididos_entre_100(self, parser):
        assert parser.account.balance.amount == Decimal("1000")
        assert parser.account.available_balance.amount == Decimal("990")

    def test_tipo_de_cuenta_no_reconocido(self, parser):
        assert parser.account.type is AccountType.UNKNOWN


class TestDocumentosInvalidos:
    def test_monto_invalido_aborta(self):
        parser = _parse(US_CHECKING.replace("<TRNAMT>2500.00", "<TRNAMT>USD"))
        with pytest.raises(ParseError, match="20201228001"):
            parser.account

    def test_fecha_de_transaccion_invalida_aborta(self):
        parser = _parse(US_CHECKING.replace("<DTPOSTED>20201230", "<DTPOSTED>30-12"))
        with pytest.raises(ParseError, match="DTPOSTED"):
            parser.account

    def test_sign_on_no_depende_de_las_transacciones(self):
        parser = _parse(US_CHECKING.replace("<TRNAMT>2500.00", "<TRNAMT>USD"))
        assert parser.sign_on.fi_name == "Example Bank"

"""
Tests del CLI de punta a punta: archivos OFX reales en tmp_path → Excel.
"""

import pandas as pd
import pytest

from ofx_parser.cli.main import main

OFX = """OFXHEADER:100
DATA:OFXSGML
VERSION:102

<OFX>
<SIGNONMSGSRSV1><SONRS><LANGUAGE>ENG<FI><ORG>Banco Demo<FID>99</FI></SONRS></SIGNONMSGSRSV1>
<BANKMSGSRSV1><STMTTRNRS><STMTRS>
<CURDEF>USD
<BANKACCTFROM><BANKID>0341<ACCTID>{acct}<ACCTTYPE>CHECKING</BANKACCTFROM>
<BANKTRANLIST>
<STMTTRN><TRNTYPE>DEBIT<DTPOSTED>20210105<TRNAMT>-10.50<FITID>{acct}-1</STMTTRN>
</BANKTRANLIST>
<LEDGERBAL><BALAMT>89.50<DTASOF>20210131</LEDGERBAL>
</STMTRS></STMTTRNRS></BANKMSGSRSV1>
</OFX>
"""


def _write_ofx(path, acct):
    path.write_text(OFX.format(acct=acct), encoding="utf-8")
    return path


class TestCli:
    def test_un_archivo(self, tmp_path):
        entrada = _write_ofx(tmp_path / "enero.ofx", "111")
        salida = tmp_path / "out"

        main([str(entrada), "-o", str(salida)])

        df = pd.read_excel(salida / "extracto_enero.xlsx", sheet_name="Transacciones")
        assert list(df["FITID"]) == ["111-1"]
        assert not (salida / "consolidado.xlsx").exists()

    def test_salida_por_defecto_junto_al_archivo(self, tmp_path):
        entrada = _write_ofx(tmp_path / "enero.ofx", "111")
        main([str(entrada)])
        assert (tmp_path / "extracto_enero.xlsx").exists()

    def test_directorio_genera_consolidado(self, tmp_path):
        _write_ofx(tmp_path / "a.ofx", "111")
        (tmp_path / "sub").mkdir()
        _write_ofx(tmp_path / "sub" / "b.qfx", "222")
        (tmp_path / "notas.txt").write_text("no es OFX")
        salida = tmp_path / "out"

        main([str(tmp_path), "-o", str(salida)])

        assert (salida / "extracto_a.xlsx").exists()
        assert (salida / "extracto_b.xlsx").exists()
        resumen = pd.read_excel(salida / "consolidado.xlsx", sheet_name="Resumen", dtype={"Cuenta": str})
        assert list(resumen["Cuenta"]) == ["111", "222"]

    def test_ruta_inexistente(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path / "no_existe.ofx")])
        assert exc.value.code == 1

    def test_ningun_archivo_valido(self, tmp_path, capsys):
        (tmp_path / "roto.ofx").write_text("VERSION:211\n<OFX></OFX>")

        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path), "-o", str(tmp_path / "out")])

        assert exc.value.code == 1
        assert "No se procesó ningún archivo" in capsys.readouterr().out

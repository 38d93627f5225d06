"""
Tests del ConsoleLogger: contadores del resumen y salida a consola.
"""

from pathlib import Path

import pytest

from ofx_parser.adapters.output.loggers.console_logger import ConsoleLogger
from ofx_parser.domain.exceptions import UnsupportedFileError


@pytest.fixture
def logger():
    return ConsoleLogger()


class TestResumen:
    def test_resumen_inicial_vacio(self, logger):
        summary = logger.get_summary()
        assert summary["archivos_recibidos"] == 0
        assert summary["archivos_procesados"] == 0
        assert summary["archivos_con_error"] == 0
        assert summary["errores"] == []

    def test_cuenta_archivos_y_transacciones(self, logger):
        logger.log_file_received(Path("a.ofx"), "ofx-file")
        logger.log_parse_complete(Path("a.ofx"), "123", 4)
        logger.log_file_received(Path("b.ofx"), "ofx-file")
        logger.log_parse_complete(Path("b.ofx"), "456", 2)
        logger.log_file_skipped(Path("notas.txt"), "extensión no soportada")

        summary = logger.get_summary()
        assert summary["archivos_recibidos"] == 2
        assert summary["archivos_procesados"] == 2
        assert summary["archivos_descartados"] == 1
        assert summary["total_transacciones"] == 6

    def test_registra_errores(self, logger):
        error = UnsupportedFileError("c.ofx", "Versión '211' sin parser")
        logger.log_error(Path("/tmp/c.ofx"), error)

        summary = logger.get_summary()
        assert summary["archivos_con_error"] == 1
        assert summary["errores"][0]["archivo"] == "c.ofx"
        assert "211" in summary["errores"][0]["error"]


class TestSalida:
    def test_version_no_soportada_sin_encabezado(self, logger, capsys):
        logger.log_unsupported_version(Path("x.ofx"), "")
        assert "sin VERSION" in capsys.readouterr().out

    def test_cuenta_vacia(self, logger, capsys):
        logger.log_parse_complete(Path("x.ofx"), "", 0)
        assert "(sin ACCTID)" in capsys.readouterr().out

    def test_print_summary_lista_errores(self, logger, capsys):
        logger.log_error(Path("malo.ofx"), ValueError("monto inválido"))
        logger.print_summary()

        out = capsys.readouterr().out
        assert "RESUMEN DE PROCESAMIENTO" in out
        assert "malo.ofx: monto inválido" in out


class TestVersionesYExportes:
    def test_cuenta_versiones(self, logger):
        logger.log_version_detected(Path("a.ofx"), "102")
        logger.log_version_detected(Path("b.ofx"), "102")
        assert logger.get_summary()["versiones"] == {"102": 2}

    def test_registra_excel_generados(self, logger, tmp_path):
        logger.log_export_complete(tmp_path / "consolidado.xlsx")
        assert logger.get_summary()["excel_generados"] == [str(tmp_path / "consolidado.xlsx")]

    def test_version_no_soportada_cuenta_como_descartado(self, logger):
        logger.log_unsupported_version(Path("x.ofx"), "211")
        summary = logger.get_summary()
        assert summary["archivos_descartados"] == 1
        assert summary["archivos_con_error"] == 0

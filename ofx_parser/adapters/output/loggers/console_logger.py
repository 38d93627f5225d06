"""
Adaptador de salida: Logger a consola.

Imprime cada evento del ProcessLogger en una línea con emoji y acumula lo
necesario para el resumen final: archivos por resultado, versiones OFX
vistas, transacciones parseadas y Excel generados.
"""

from collections import Counter
from pathlib import Path

from ofx_parser.domain.ports.process_logger import ProcessLogger


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de procesamiento a consola."""

    def __init__(self) -> None:
        self._recibidos = 0
        self._procesados = 0
        self._descartados = 0
        self._transacciones = 0
        self._versiones: Counter[str] = Counter()
        self._exportados: list[Path] = []
        self._errores: list[dict] = []

    def log_file_received(self, file_path: Path, reader_name: str) -> None:
        self._recibidos += 1
        print(f"  📄 Recibido: {file_path.name} ({reader_name})")

    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        self._descartados += 1
        print(f"  ⏭️  Descartado: {file_path.name}: {reason}")

    def log_version_detected(self, file_path: Path, version: str) -> None:
        self._versiones[version] += 1
        print(f"  🔖 OFX versión {version}: {file_path.name}")

    def log_unsupported_version(self, file_path: Path, version: str) -> None:
        self._descartados += 1
        print(f"  ⚠️  Versión OFX no soportada ({version or 'sin VERSION'}): {file_path.name}")

    def log_parse_complete(
        self, file_path: Path, account_id: str, num_transactions: int
    ) -> None:
        self._procesados += 1
        self._transacciones += num_transactions
        cuenta = account_id or "(sin ACCTID)"
        print(f"  ✅ {file_path.name}: cuenta {cuenta}, {num_transactions} transacciones")

    def log_error(self, file_path: Path, error: Exception) -> None:
        self._errores.append({"archivo": file_path.name, "error": str(error)})
        print(f"  ❌ Error en {file_path.name}: {error}")

    def log_export_complete(self, output_path: Path) -> None:
        self._exportados.append(output_path)
        print(f"  📁 Excel generado: {output_path}")

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._recibidos,
            "archivos_procesados": self._procesados,
            "archivos_descartados": self._descartados,
            "archivos_con_error": len(self._errores),
            "total_transacciones": self._transacciones,
            "versiones": dict(self._versiones),
            "excel_generados": [str(p) for p in self._exportados],
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del procesamiento."""
        summary = self.get_summary()
        linea = "-" * 60

        print(f"\n{linea}\nRESUMEN DE PROCESAMIENTO\n{linea}")
        for etiqueta, clave in (
            ("Recibidos", "archivos_recibidos"),
            ("Procesados", "archivos_procesados"),
            ("Descartados", "archivos_descartados"),
            ("Con error", "archivos_con_error"),
            ("Transacciones", "total_transacciones"),
        ):
            print(f"  {etiqueta:<14} {summary[clave]}")

        if self._versiones:
            versiones = ", ".join(f"{v} ({n})" for v, n in sorted(self._versiones.items()))
            print(f"  {'Versiones':<14} {versiones}")

        for err in self._errores:
            print(f"  ! {err['archivo']}: {err['error']}")

        print(linea)

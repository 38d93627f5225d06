"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define el contrato para registrar eventos durante el procesamiento de
archivos OFX.

¿Por qué no usar simplemente el módulo `logging` de Python?
Porque `logging` es una herramienta de infraestructura (HOW), mientras que
este puerto define los EVENTOS de negocio (WHAT):
- "Se recibió un archivo"
- "La versión del OFX no está soportada"
- "Se parsearon N transacciones"

La implementación puede usar `logging` internamente, pero el dominio
solo conoce los eventos de negocio. En tests se acumulan en memoria.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    # --- Lectura ---

    @abstractmethod
    def log_file_received(self, file_path: Path, reader_name: str) -> None:
        """Registra que se recibió un archivo y qué lector lo va a leer."""
        ...

    @abstractmethod
    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        """Registra que un archivo fue descartado.

        Args:
            file_path: Ruta del archivo descartado.
            reason: Razón del descarte. Ejemplo: "Extensión .csv no soportada"
        """
        ...

    # --- Parseo ---

    @abstractmethod
    def log_version_detected(self, file_path: Path, version: str) -> None:
        """Registra la versión OFX detectada en los encabezados."""
        ...

    @abstractmethod
    def log_unsupported_version(self, file_path: Path, version: str) -> None:
        """Registra que la versión OFX no tiene parser."""
        ...

    @abstractmethod
    def log_parse_complete(
        self, file_path: Path, account_id: str, num_transactions: int
    ) -> None:
        """Registra el fin exitoso del parseo de un archivo."""
        ...

    @abstractmethod
    def log_error(self, file_path: Path, error: Exception) -> None:
        """Registra un error durante el procesamiento."""
        ...

    # --- Exportación ---

    @abstractmethod
    def log_export_complete(self, output_path: Path) -> None:
        """Registra que se generó un archivo de salida."""
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo el procesamiento.

        Returns:
            Diccionario con métricas:
            {
                'archivos_recibidos': int,
                'archivos_procesados': int,
                'archivos_descartados': int,
                'archivos_con_error': int,
                'total_transacciones': int,
                'errores': List[dict],  # [{archivo, error}]
            }
        """
        ...

"""
Puerto de salida: Escritor de resultados.

Define el contrato para escribir los extractos parseados en algún formato
persistente. Hoy es Excel; mañana podría ser CSV o una base de datos.
Ningún cambio en el dominio.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from ofx_parser.domain.models.parsed_statement import ParsedStatement


class OutputWriter(ABC):
    """Interfaz para escribir extractos parseados."""

    @abstractmethod
    def write_single(self, statement: ParsedStatement, output_path: Path) -> Path:
        """Escribe el resultado de un solo archivo OFX.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura (permisos, disco lleno, etc.)
        """
        ...

    @abstractmethod
    def write_consolidated(self, statements: list[ParsedStatement], output_path: Path) -> Path:
        """Escribe todos los extractos en un único archivo.

        Raises:
            OutputError: Si la lista está vacía o falla la escritura.
        """
        ...

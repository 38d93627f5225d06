"""
Registro de parsers por versión de OFX.

Centraliza la relación VERSION (encabezado) → clase de parser.
El encabezado VERSION llega de formas distintas según el banco:
"102", "1.0.2", " 102 ". Se compara solo por los dígitos.

¿Por qué un registro separado y no un if en el procesador?
Porque el procesador no debe saber qué versiones existen. Solo pide
"dame el parser para esta versión" y el registro se lo da.
"""

import re

from ofx_parser.domain.services.ofx102_parser import Ofx102Parser


def normalize_version(version: str | None) -> str:
    """Deja solo los dígitos de un encabezado VERSION.

    Ejemplos:
        >>> normalize_version("1.0.2")
        '102'
        >>> normalize_version(None)
        ''
    """
    return re.sub(r"\D", "", version or "")


class VersionRegistry:
    """Registro de parsers de OFX disponibles, por versión."""

    def __init__(self) -> None:
        self._parsers: dict[str, type[Ofx102Parser]] = {}

    def register(self, version: str, parser_class: type[Ofx102Parser]) -> None:
        """Registra la clase de parser para una versión.

        Raises:
            ValueError: Si ya existe un parser para esa versión.
        """
        key = normalize_version(version)
        if key in self._parsers:
            raise ValueError(
                f"Ya existe un parser registrado para la versión '{key}': "
                f"{self._parsers[key].__name__}. "
                f"No se puede registrar {parser_class.__name__}."
            )
        self._parsers[key] = parser_class

    def get(self, version: str | None) -> type[Ofx102Parser] | None:
        """Obtiene la clase de parser para un encabezado VERSION.

        Returns:
            La clase registrada, o None si la versión no tiene parser.
        """
        return self._parsers.get(normalize_version(version))

    @property
    def available_versions(self) -> list[str]:
        """Lista de versiones con parser disponible."""
        return sorted(self._parsers.keys())


def create_default_registry() -> VersionRegistry:
    """Crea un registro con todos los parsers disponibles.

    Solo OFX 1.0.2 (SGML) está soportado.
    """
    registry = VersionRegistry()
    registry.register(Ofx102Parser.VERSION, Ofx102Parser)
    return registry

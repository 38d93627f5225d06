"""
Modelo de dominio: Datos de inicio de sesión (SIGNONMSGSRSV1 > SONRS).

Identifican a la institución financiera que generó el archivo.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SignOn:
    """Idioma e institución financiera del documento.

    Todos los campos son strings; quedan vacíos si el banco no los envía.
    """

    language: str
    """Código de idioma ISO 639 de 3 letras. Ejemplo: 'ENG', 'POR'."""

    fi_id: str
    """Identificador de la institución (FI > FID)."""

    fi_name: str
    """Nombre de la organización (FI > ORG). Ejemplo: 'Nubank'."""

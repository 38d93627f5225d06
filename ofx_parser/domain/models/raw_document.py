"""
Modelo de dominio: Documento OFX crudo, ya decodificado y dividido.

Este modelo actúa como el "puente" entre los lectores de archivos
(DocumentReader) y el parser de la versión correspondiente.

¿Por qué no pasar un string crudo? Porque el bloque de encabezados y el
cuerpo SGML se procesan con reglas distintas: los encabezados son líneas
`clave:valor`, el cuerpo es un árbol de etiquetas.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RawDocument:
    """Texto de un archivo OFX separado en encabezados y cuerpo."""

    header_text: str
    """Todo lo que aparece antes de la etiqueta <OFX>."""

    body: str
    """Desde <OFX> (incluida) hasta el final del archivo."""

    file_name: str = ""
    """Nombre del archivo original. Para trazabilidad en la bitácora."""

    @property
    def is_empty(self) -> bool:
        """Indica si el cuerpo no tiene contenido útil."""
        return not self.body.strip()

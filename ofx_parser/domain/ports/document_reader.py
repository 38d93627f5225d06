"""
Puerto de entrada: Lector de documentos OFX.

Define el contrato para convertir un archivo en un RawDocument:

    DocumentReader (interfaz)
    └── OfxFileReader     → archivos .ofx / .qfx en disco

¿Por qué es una Abstract Base Class (ABC)?
Porque queremos que Python lance un error si alguien crea un lector
que no implementa todos los métodos.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from ofx_parser.domain.models.raw_document import RawDocument


class DocumentReader(ABC):
    """Interfaz para leer un archivo y separarlo en encabezados y cuerpo."""

    @abstractmethod
    def can_handle(self, file_path: Path) -> bool:
        """Determina si este lector puede manejar el archivo dado.

        El StatementProcessor usa el primer lector cuyo can_handle
        devuelva True.
        """
        ...

    @abstractmethod
    def read(self, file_path: Path) -> RawDocument:
        """Lee el archivo y devuelve el documento dividido.

        Raises:
            ExtractionError: Si el archivo no se puede leer o decodificar.
            UnsupportedFileError: Si el contenido no es un OFX.
        """
        ...

    @abstractmethod
    def split(self, content: str, file_name: str = "") -> RawDocument:
        """Divide un texto OFX ya decodificado en encabezados y cuerpo.

        Raises:
            UnsupportedFileError: Si el texto no contiene <OFX>.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre legible del lector. Ejemplo: 'ofx-file'."""
        ...

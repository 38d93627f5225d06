"""
Adaptador de entrada: Lector de archivos OFX/QFX en disco.

Este adaptador:
1. Lee los bytes del archivo.
2. Los decodifica: UTF-8 si es válido; si no, ISO-8859-1 (la mayoría de
   los OFX brasileños vienen en Latin-1 aunque declaren USASCII).
3. Separa el bloque de encabezados del cuerpo en la primera <OFX>.

El parseo de encabezados y del cuerpo NO ocurre aquí; eso es del dominio.
"""

import re
from pathlib import Path

from ofx_parser.domain.exceptions import ExtractionError, UnsupportedFileError
from ofx_parser.domain.models.raw_document import RawDocument
from ofx_parser.domain.ports.document_reader import DocumentReader

_OFX_ROOT = re.compile(r"<OFX>", re.IGNORECASE)


def decode_ofx(raw: bytes) -> str:
    """Decodifica los bytes de un OFX.

    Ejemplos:
        >>> decode_ofx("Pão".encode("utf-8"))
        'Pão'
        >>> decode_ofx("Pão".encode("latin-1"))
        'Pão'
    """
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        return raw.decode("iso-8859-1")


class OfxFileReader(DocumentReader):
    """Lee archivos .ofx y .qfx."""

    EXTENSIONS: tuple[str, ...] = (".ofx", ".qfx")

    @property
    def name(self) -> str:
        return "ofx-file"

    def can_handle(self, file_path: Path) -> bool:
        return file_path.suffix.lower() in self.EXTENSIONS

    def read(self, file_path: Path) -> RawDocument:
        """Lee y divide un archivo OFX.

        Raises:
            ExtractionError: Si el archivo no existe o no se puede leer.
            UnsupportedFileError: Si no contiene la etiqueta <OFX>.
        """
        if not file_path.exists():
            raise ExtractionError(str(file_path), "El archivo no existe")

        try:
            raw = file_path.read_bytes()
        except OSError as e:
            raise ExtractionError(str(file_path), str(e))

        return self.split(decode_ofx(raw), file_name=file_path.name)

    def split(self, content: str, file_name: str = "") -> RawDocument:
        m = _OFX_ROOT.search(content)
        if m is None:
            raise UnsupportedFileError(file_name or "<memoria>", "No se encontró la etiqueta <OFX>")

        return RawDocument(
            header_text=content[: m.start()],
            body=content[m.start() :],
            file_name=file_name,
        )

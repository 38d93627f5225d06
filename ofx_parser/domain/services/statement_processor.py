"""
Servicio de dominio: Procesador de archivos OFX.

Orquesta el flujo completo:
1. Recibe una ruta a un archivo (o el texto ya en memoria).
2. Selecciona el DocumentReader adecuado (can_handle).
3. Lee, decodifica y separa encabezados y cuerpo.
4. Parsea los encabezados y obtiene el parser de la versión (Registry).
5. Construye el árbol del cuerpo (TagTreeBuilder).
6. Arma Account y SignOn y devuelve ParsedStatement.

Política de errores: cada archivo es independiente. Un ParserBaseError
(archivo no soportado, monto inválido...) se registra en la bitácora y
el archivo se descarta; el resto del lote sigue.
"""

from collections.abc import Sequence
from pathlib import Path

from ofx_parser.domain.exceptions import (
    ParserBaseError,
    UnsupportedFileError,
    UnsupportedVersionError,
)
from ofx_parser.domain.models.parsed_statement import ParsedStatement
from ofx_parser.domain.models.raw_document import RawDocument
from ofx_parser.domain.ports.document_reader import DocumentReader
from ofx_parser.domain.ports.process_logger import ProcessLogger
from ofx_parser.domain.ports.tag_tree import TagTreeBuilder
from ofx_parser.domain.shared.header_parser import parse_headers
from ofx_parser.infrastructure.registry import VersionRegistry

OFX_EXTENSIONS = (".ofx", ".qfx")


class StatementProcessor:
    """Procesa un archivo OFX y produce un ParsedStatement.

    Recibe sus dependencias por constructor (Dependency Injection).
    No sabe qué lector ni qué motor de markup concretos se están usando;
    solo conoce las interfaces (puertos).
    """

    def __init__(
        self,
        readers: Sequence[DocumentReader],
        tree_builder: TagTreeBuilder,
        registry: VersionRegistry,
        logger: ProcessLogger,
    ) -> None:
        """
        Args:
            readers: Lectores disponibles, en orden de prioridad.
            tree_builder: Constructor del árbol de etiquetas del cuerpo.
            registry: Registro de parsers por versión.
            logger: Logger para la bitácora de procesamiento.
        """
        self._readers = readers
        self._tree_builder = tree_builder
        self._registry = registry
        self._logger = logger

    def process_file(self, file_path: Path) -> ParsedStatement | None:
        """Procesa un archivo y devuelve el resultado.

        Returns:
            ParsedStatement si el procesamiento fue exitoso.
            None si el archivo fue descartado o hubo un error.
        """
        reader = self._find_reader(file_path)
        if reader is None:
            self._logger.log_file_skipped(
                file_path, f"Ningún lector puede manejar '{file_path.suffix}'"
            )
            return None

        self._logger.log_file_received(file_path, reader.name)

        try:
            document = reader.read(file_path)
        except ParserBaseError as e:
            self._logger.log_error(file_path, e)
            return None

        return self._process(document, file_path)

    def process_text(self, content: str, file_name: str = "") -> ParsedStatement | None:
        """Procesa un OFX que ya está en memoria como texto.

        Usa el primer lector registrado solo para separar encabezados y cuerpo.
        """
        file_path = Path(file_name or "<memoria>")
        try:
            document = self._readers[0].split(content, file_name=file_name)
        except ParserBaseError as e:
            self._logger.log_error(file_path, e)
            return None

        return self._process(document, file_path)

    def process_document(self, document: RawDocument) -> ParsedStatement:
        """Parsea un documento ya dividido. NO captura errores.

        Raises:
            UnsupportedFileError: Cuerpo vacío o sin encabezados.
            UnsupportedVersionError: Si la versión no tiene parser.
            ParseError: Si un monto o una fecha de transacción son inválidos.
        """
        file_path = Path(document.file_name or "<memoria>")

        if document.is_empty:
            raise UnsupportedFileError(str(file_path), "El cuerpo del documento está vacío")

        headers = parse_headers(document.header_text)
        if headers is None:
            raise UnsupportedFileError(str(file_path), "El bloque de encabezados está vacío")

        version = headers.get("VERSION") or ""
        parser_class = self._registry.get(version)
        if parser_class is None:
            raise UnsupportedVersionError(
                str(file_path), version, self._registry.available_versions
            )

        self._logger.log_version_detected(file_path, version)

        parser = parser_class(headers, self._tree_builder.build(document.body))
        return ParsedStatement(
            headers=headers,
            sign_on=parser.sign_on,
            account=parser.account,
            file_name=document.file_name,
        )

    def process_directory(self, dir_path: Path) -> list[ParsedStatement]:
        """Procesa todos los archivos OFX/QFX de un directorio (recursivo).

        Returns:
            Lista de ParsedStatement (solo los exitosos), en orden de ruta.
        """
        if not dir_path.is_dir():
            raise ValueError(f"No es un directorio: {dir_path}")

        archivos = sorted(
            p for p in dir_path.glob("**/*") if p.is_file() and p.suffix.lower() in OFX_EXTENSIONS
        )

        resultados: list[ParsedStatement] = []
        for archivo in archivos:
            resultado = self.process_file(archivo)
            if resultado is not None:
                resultados.append(resultado)

        return resultados

    def _process(self, document: RawDocument, file_path: Path) -> ParsedStatement | None:
        try:
            resultado = self.process_document(document)
        except UnsupportedVersionError as e:
            self._logger.log_unsupported_version(file_path, e.version)
            return None
        except ParserBaseError as e:
            self._logger.log_error(file_path, e)
            return None

        self._logger.log_parse_complete(
            file_path, resultado.account.id, resultado.transaction_count
        )
        return resultado

    def _find_reader(self, file_path: Path) -> DocumentReader | None:
        for reader in self._readers:
            if reader.can_handle(file_path):
                return reader
        return None

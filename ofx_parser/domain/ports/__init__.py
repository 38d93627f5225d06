"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from ofx_parser.domain.ports import TagTree, DocumentReader, OutputWriter
"""

from ofx_parser.domain.ports.document_reader import DocumentReader
from ofx_parser.domain.ports.output_writer import OutputWriter
from ofx_parser.domain.ports.process_logger import ProcessLogger
from ofx_parser.domain.ports.tag_tree import TagTree, TagTreeBuilder

__all__ = [
    "DocumentReader",
    "OutputWriter",
    "ProcessLogger",
    "TagTree",
    "TagTreeBuilder",
]

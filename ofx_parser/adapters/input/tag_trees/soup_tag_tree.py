"""
Adaptador de entrada: Árbol de etiquetas usando BeautifulSoup.

BeautifulSoup con el parser "html.parser" de la librería estándar tolera
etiquetas desconocidas y normaliza los nombres a minúsculas, pero NO sabe
que en SGML las etiquetas hoja se dejan abiertas:

    <BANKID>0341
    <ACCTID>12345

Sin ayuda, ACCTID quedaría anidado dentro de BANKID y el selector
"bankacctfrom > acctid" no encontraría nada. Por eso el cuerpo pasa
primero por clean_ofx_body(), que cierra esas etiquetas.

Las consultas usan selectores CSS (soupsieve, incluido con bs4):
"a > b" para hijo directo y "a > b, c > d" para alternativas.
"""

from bs4 import BeautifulSoup, Tag

from ofx_parser.domain.ports.tag_tree import TagTree, TagTreeBuilder
from ofx_parser.domain.shared.text_cleaner import clean_ofx_body


class SoupTagTree(TagTree):
    """Nodo (o documento completo) de un OFX parseado con BeautifulSoup."""

    def __init__(self, node: Tag) -> None:
        self._node = node

    @classmethod
    def from_body(cls, body: str) -> "SoupTagTree":
        """Construye el árbol a partir del cuerpo SGML crudo."""
        return cls(BeautifulSoup(clean_ofx_body(body), "html.parser"))

    @property
    def tag_name(self) -> str:
        """Nombre de la etiqueta en minúsculas ('[document]' para la raíz)."""
        return self._node.name

    def select(self, selector: str) -> list[TagTree]:
        return [SoupTagTree(node) for node in self._node.select(selector)]

    def text(self, selector: str | None = None) -> str:
        if selector is None:
            return self._node.get_text().strip()
        return "".join(node.get_text() for node in self._node.select(selector)).strip()

    def exists(self, selector: str) -> bool:
        return self._node.select_one(selector) is not None


class SoupTreeBuilder(TagTreeBuilder):
    """Construye SoupTagTree a partir del cuerpo de un OFX."""

    @property
    def name(self) -> str:
        return "beautifulsoup"

    def build(self, body: str) -> TagTree:
        return SoupTagTree.from_body(body)

"""
Puerto de entrada: Árbol de etiquetas del cuerpo OFX.

El cuerpo de un OFX 1.0.2 es "tag soup": etiquetas sin cerrar, mayúsculas
y minúsculas mezcladas, espacios arbitrarios. Construir un árbol a partir
de eso es trabajo de una librería de markup; el dominio solo necesita
consultarlo.

    TagTree (interfaz)
    └── SoupTagTree     → BeautifulSoup + soupsieve

¿Por qué una interfaz tan angosta (select / text / exists)?
Porque así el parser de OFX 1.0.2 y sus normalizadores se pueden probar
sin depender de un motor de markup concreto.

Selectores:
    "parent > child"            → hijo directo
    "a > b, c > d"              → alternativas (OR lógico)
Los nombres de etiqueta son case-insensitive.
"""

from abc import ABC, abstractmethod


class TagTree(ABC):
    """Interfaz para consultar un nodo (o documento) del árbol OFX."""

    @abstractmethod
    def select(self, selector: str) -> list["TagTree"]:
        """Devuelve los descendientes que coinciden con el selector.

        Args:
            selector: Uno o más caminos de etiquetas separados por coma.

        Returns:
            Lista de subárboles en orden de documento. Vacía si no hay
            coincidencias (nunca lanza por "no encontrado").
        """
        ...

    @abstractmethod
    def text(self, selector: str | None = None) -> str:
        """Texto concatenado de los nodos seleccionados.

        Args:
            selector: Si es None, el texto del propio nodo.

        Returns:
            El texto de todas las coincidencias unido, sin espacios en los
            extremos. Cadena vacía si no hay coincidencias.
        """
        ...

    def exists(self, selector: str) -> bool:
        """Indica si hay al menos un nodo que coincida con el selector."""
        return len(self.select(selector)) > 0


class TagTreeBuilder(ABC):
    """Interfaz para construir un TagTree a partir del cuerpo de un OFX."""

    @abstractmethod
    def build(self, body: str) -> TagTree:
        """Construye el árbol del cuerpo SGML.

        Debe tolerar etiquetas sin cerrar y en cualquier capitalización.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre legible del constructor. Para logging y debugging."""
        ...

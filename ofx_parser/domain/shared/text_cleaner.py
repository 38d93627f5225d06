"""
Utilidades de limpieza de texto OFX.

Funciones reutilizables para normalizar el texto crudo de un archivo OFX
antes de que el parser de encabezados o el árbol de etiquetas lo procesen.

Estas funciones NO tienen lógica de negocio (no saben de montos ni fechas).
Solo operan sobre strings puros.
"""

import re

# Un \r que NO va seguido de \n (Mac antiguo y algunos bancos brasileños).
_LONE_CR = re.compile(r"\r(?!\n)")

# Apertura o cierre de etiqueta. Un '>' suelto dentro de un valor no cuenta.
_TAG = r"</?[\w.]+>"

# Elementos hoja de OFX 1.0.2 que algunos bancos envían vacíos (<BRANCHID>
# seguido directamente de otra etiqueta). Sin contenido no hay forma de
# distinguirlos de un agregado, así que se cierran solo los conocidos.
_EMPTY_LEAF = re.compile(
    r"<(BRANCHID|ACCTKEY|MEMO|NAME|CHECKNUM|REFNUM|SIC|SRVRTID|DTUSER|DTAVAIL|MESSAGE)>"
    r"(?=<)(?!</\1>)",
    re.IGNORECASE,
)

# Etiqueta hoja abierta al estilo SGML: <TAG>valor sin </TAG>.
# El valor se toma completo hasta el siguiente '<' (el lookahead impide
# que el regex lo recorte para "esquivar" un cierre que sí existe).
_OPEN_LEAF = re.compile(r"<(\w+)>([^<]+)(?=<|\Z)(?!</\1>)", re.IGNORECASE)


def normalize_line_endings(text: str) -> str:
    """Convierte los \\r sueltos en \\n, dejando intactos los \\r\\n.

    Ejemplos:
        >>> normalize_line_endings("A:1\\rB:2\\r\\n")
        'A:1\\nB:2\\r\\n'
    """
    return _LONE_CR.sub("\n", text)


def remove_non_printable(text: str) -> str:
    """Elimina caracteres no imprimibles (control chars) excepto \\n, \\r, \\t.

    Algunos exportadores dejan un BOM o bytes NUL al inicio del archivo.

    Ejemplos:
        >>> remove_non_printable("OFX\\x00HEADER")
        'OFX HEADER'
    """
    return "".join(char if (char.isprintable() or char in "\n\r\t") else " " for char in text)


def collapse_tag_whitespace(body: str) -> str:
    """Quita los espacios y saltos de línea que rodean a las etiquetas.

    Solo se tocan los espacios pegados a una etiqueta; el texto de un valor
    como "A > B" se conserva.

    Ejemplos:
        >>> collapse_tag_whitespace("<STMTTRN>\\n  <TRNTYPE>DEBIT\\n</STMTTRN>")
        '<STMTTRN><TRNTYPE>DEBIT</STMTTRN>'
    """
    body = re.sub(rf"\s+(?={_TAG})", "", body)
    body = re.sub(rf"({_TAG})\s+", r"\1", body)
    return body.strip()


def close_open_tags(body: str) -> str:
    """Cierra las etiquetas hoja que el formato SGML deja abiertas.

    Ejemplos:
        >>> close_open_tags("<BANKID>0341<ACCTID>123</BANKACCTFROM>")
        '<BANKID>0341</BANKID><ACCTID>123</ACCTID></BANKACCTFROM>'
        >>> close_open_tags("<CODE>0</CODE>")
        '<CODE>0</CODE>'
    """
    body = _EMPTY_LEAF.sub(r"<\1></\1>", body)
    return _OPEN_LEAF.sub(r"<\1>\2</\1>", body)


def clean_ofx_body(body: str) -> str:
    """Aplica todas las limpiezas del cuerpo en secuencia.

    Secuencia:
    1. Eliminar caracteres no imprimibles
    2. Quitar espacios alrededor de las etiquetas
    3. Cerrar las etiquetas hoja abiertas

    El orden importa: si se cerraran las etiquetas antes de quitar los
    espacios, el salto de línea final quedaría dentro de cada valor.
    """
    body = remove_non_printable(body)
    body = collapse_tag_whitespace(body)
    return close_open_tags(body)

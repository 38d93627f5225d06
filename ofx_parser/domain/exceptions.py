"""
Excepciones de dominio del proyecto ofx-parser.

¿Por qué excepciones propias en lugar de usar ValueError/RuntimeError?
Porque el StatementProcessor necesita distinguir entre "esto no es un OFX
1.0.2" y "el OFX trae un monto que no sabemos normalizar". El primero se
registra y se descarta; el segundo indica un banco con un formato nuevo
que hay que revisar.

Jerarquía:
    ParserBaseError
    ├── UnsupportedFileError    → No es OFX o no tiene encabezados
    │   └── UnsupportedVersionError → El encabezado VERSION no tiene parser
    ├── ExtractionError         → Error al leer/decodificar el archivo
    ├── ParseError              → Un monto o fecha de transacción no se pudo normalizar
    └── OutputError             → Error al generar el archivo de salida
"""


class ParserBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta.

    Permite capturar CUALQUIER error del proyecto con un solo
    `except ParserBaseError` en el procesador.
    """


class UnsupportedFileError(ParserBaseError):
    """Se lanza cuando un documento no es un OFX que sepamos parsear.

    Esto puede pasar porque:
    - El archivo no contiene la etiqueta <OFX>.
    - El bloque de encabezados está vacío.
    - El encabezado VERSION indica una versión distinta de 1.0.2.
    """

    def __init__(self, archivo: str, detalle: str = ""):
        self.archivo = archivo
        self.detalle = detalle
        mensaje = f"Archivo OFX no soportado: {archivo}"
        if detalle:
            mensaje += f" ({detalle})"
        super().__init__(mensaje)


class UnsupportedVersionError(UnsupportedFileError):
    """Se lanza cuando el encabezado VERSION no tiene parser registrado."""

    def __init__(self, archivo: str, version: str, disponibles: list[str]):
        self.version = version
        self.disponibles = disponibles
        super().__init__(
            archivo,
            f"Versión '{version}' sin parser. Versiones disponibles: {disponibles}",
        )


class ExtractionError(ParserBaseError):
    """Se lanza cuando falla la lectura del archivo.

    - El archivo no existe o no hay permisos de lectura.
    - Los bytes no se pueden decodificar ni como UTF-8 ni como ISO-8859-1.
    """

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"Error leyendo '{archivo}': {causa}")


class ParseError(ParserBaseError):
    """Se lanza cuando un valor de una transacción no se puede normalizar.

    Un monto o una fecha de transacción inválidos NO se reemplazan por
    cero ni por None: eso corrompería los totales en silencio. El error
    incluye el campo, el valor crudo y el FITID para ubicar la transacción.
    """

    def __init__(self, campo: str, valor: str, causa: str, fit_id: str = ""):
        self.campo = campo
        self.valor = valor
        self.causa = causa
        self.fit_id = fit_id
        mensaje = f"Error normalizando {campo}='{valor}'"
        if fit_id:
            mensaje += f" en la transacción {fit_id}"
        super().__init__(f"{mensaje}: {causa}")


class OutputError(ParserBaseError):
    """Se lanza cuando falla la generación del archivo de salida."""

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")

"""
ofx-parser: lector de extractos bancarios OFX 1.0.2.

Convierte los extractos que exportan los bancos (encabezados `CLAVE:VALOR`
más un cuerpo SGML) en objetos de dominio: SignOn, Account, Balance y
Transaction. Ver `ofx_parser.cli.main` para el ensamblado completo.
"""

__version__ = "0.1.0"

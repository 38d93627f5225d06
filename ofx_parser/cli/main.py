"""
Punto de entrada CLI: ofx-parser.

Uso:
    # Procesar un solo archivo
    ofx-parser /ruta/extrato.ofx -o /ruta/salida

    # Procesar todos los OFX/QFX de una carpeta
    ofx-parser /ruta/carpeta -o /ruta/salida

    # Sin -o, genera el Excel en el mismo directorio del archivo
    ofx-parser /ruta/extrato.ofx

Este módulo es el ÚNICO lugar donde se ensamblan los componentes:
- Crea las instancias concretas (OfxFileReader, SoupTreeBuilder, ExcelWriter...)
- Las inyecta en el StatementProcessor.
- Ejecuta el procesamiento.

No contiene lógica de negocio, solo "fontanería" (wiring).
"""

import argparse
import sys
from pathlib import Path

from ofx_parser.adapters.input.readers.ofx_file_reader import OfxFileReader
from ofx_parser.adapters.input.tag_trees.soup_tag_tree import SoupTreeBuilder
from ofx_parser.adapters.output.loggers.console_logger import ConsoleLogger
from ofx_parser.adapters.output.writers.excel_writer import ExcelWriter
from ofx_parser.domain.exceptions import OutputError
from ofx_parser.domain.services.statement_processor import StatementProcessor
from ofx_parser.infrastructure.registry import create_default_registry


def main(argv: list[str] | None = None) -> None:
    """Punto de entrada principal del CLI."""
    args = _parse_args(argv)

    input_path = Path(args.input_path)
    output_dir = Path(args.output_dir) if args.output_dir else None

    # --- Ensamblar componentes ---
    logger = ConsoleLogger()
    registry = create_default_registry()
    excel_writer = ExcelWriter()

    processor = StatementProcessor(
        readers=[OfxFileReader()],
        tree_builder=SoupTreeBuilder(),
        registry=registry,
        logger=logger,
    )

    # --- Determinar directorio de salida ---
    if output_dir is None:
        output_dir = input_path.parent if input_path.is_file() else input_path

    print("=" * 60)
    print("OFX PARSER")
    print("=" * 60)
    print(f"  Entrada:  {input_path}")
    print(f"  Salida:   {output_dir}")
    print(f"  Versiones OFX soportadas: {', '.join(registry.available_versions)}")
    print()

    if input_path.is_file():
        resultados = [r for r in [processor.process_file(input_path)] if r is not None]
    elif input_path.is_dir():
        resultados = processor.process_directory(input_path)
    else:
        print(f"❌ La ruta no existe: {input_path}")
        sys.exit(1)

    if not resultados:
        print("\n❌ No se procesó ningún archivo.")
        logger.print_summary()
        sys.exit(1)

    # --- Exportar ---
    try:
        for resultado in resultados:
            nombre_base = Path(resultado.file_name).stem or "extracto"
            output_file = excel_writer.write_single(
                resultado, output_dir / f"extracto_{nombre_base}.xlsx"
            )
            logger.log_export_complete(output_file)

        if len(resultados) > 1:
            consolidado = excel_writer.write_consolidated(
                resultados, output_dir / "consolidado.xlsx"
            )
            logger.log_export_complete(consolidado)
    except OutputError as e:
        logger.log_error(output_dir, e)
        logger.print_summary()
        sys.exit(1)

    # --- Resumen final ---
    logger.print_summary()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        description="Convierte extractos OFX 1.0.2 en Excel",
        epilog="Ejemplo: ofx-parser /ruta/extratos -o /ruta/salida",
    )

    parser.add_argument(
        "input_path",
        help="Ruta a un archivo OFX/QFX o a un directorio con archivos OFX",
    )

    parser.add_argument(
        "-o",
        "--output-dir",
        dest="output_dir",
        help="Directorio de salida para los Excel generados. "
        "Si no se especifica, se usa el mismo directorio del archivo.",
    )

    return parser.parse_args(argv)


if __name__ == "__main__":
    main()

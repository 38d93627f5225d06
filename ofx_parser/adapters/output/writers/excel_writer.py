"""
Adaptador de salida: Escritor de Excel.

Genera archivos Excel con 2 hojas:
- Hoja 1 (Resumen): una fila por cuenta con saldos y totales.
- Hoja 2 (Transacciones): una fila por transacción.

Las fechas se escriben como texto DD/MM/YYYY (con hora si el banco la
envía) y las cuentas como texto para conservar los ceros iniciales.
"""

from datetime import date, datetime
from pathlib import Path

import pandas as pd

from ofx_parser.domain.exceptions import OutputError
from ofx_parser.domain.models.parsed_statement import ParsedStatement
from ofx_parser.domain.ports.output_writer import OutputWriter


class ExcelWriter(OutputWriter):
    """Genera archivos Excel con formato estandarizado."""

    def write_single(self, statement: ParsedStatement, output_path: Path) -> Path:
        """Escribe un solo extracto a Excel.

        Args:
            statement: Resultado del parseo de un archivo OFX.
            output_path: Ruta donde crear el archivo. Si no termina en .xlsx,
                        se le agrega la extensión.
        """
        return self._write([statement], output_path)

    def write_consolidated(self, statements: list[ParsedStatement], output_path: Path) -> Path:
        if not statements:
            raise OutputError(str(output_path), "No hay extractos para consolidar")
        return self._write(statements, output_path)

    # =================================================================
    # MÉTODOS PRIVADOS
    # =================================================================

    def _write(self, statements: list[ParsedStatement], output_path: Path) -> Path:
        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")

        output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            self._escribir_excel(statements, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e))

        return output_path

    def _escribir_excel(self, statements: list[ParsedStatement], output_path: Path) -> None:
        # --- Construir datos de Transacciones ---
        filas_transacciones = []
        for statement in statements:
            account = statement.account
            for tx in account.transactions:
                filas_transacciones.append(
                    {
                        "Cuenta": account.id,
                        "Moneda": account.currency,
                        "Fecha": _format_date(tx.posted_at),
                        "FITID": tx.fit_id,
                        "Tipo": tx.type.value,
                        "Nombre": tx.name,
                        "Memo": tx.memo,
                        "Cheque": tx.check_number,
                        "Referencia": tx.ref_number,
                        "Monto": float(tx.amount),
                    }
                )

        df_transacciones = pd.DataFrame(
            filas_transacciones,
            columns=[
                "Cuenta",
                "Moneda",
                "Fecha",
                "FITID",
                "Tipo",
                "Nombre",
                "Memo",
                "Cheque",
                "Referencia",
                "Monto",
            ],
        )

        # --- Construir datos de Resumen ---
        filas_resumen = []
        for statement in statements:
            account = statement.account
            disponible = account.available_balance
            filas_resumen.append(
                {
                    "Banco": statement.sign_on.fi_name,
                    "BankID": account.bank_id,
                    "Cuenta": account.id,
                    "Tipo": account.type.value,
                    "Moneda": account.currency,
                    "Saldo": float(account.balance.amount),
                    "Fecha Saldo": _format_date(account.balance.posted_at),
                    "Saldo Disponible": float(disponible.amount) if disponible else None,
                    "Num Transacciones": statement.transaction_count,
                    "Total Transacciones": float(statement.total_amount),
                    "Archivo": statement.file_name,
                }
            )

        df_resumen = pd.DataFrame(filas_resumen)

        # --- Escribir Excel con xlsxwriter ---
        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            df_resumen.to_excel(writer, index=False, sheet_name="Resumen")
            df_transacciones.to_excel(writer, index=False, sheet_name="Transacciones")

            workbook = writer.book
            ws_resumen = writer.sheets["Resumen"]
            ws_transacciones = writer.sheets["Transacciones"]

            # Formato para texto (mantener ceros iniciales en cuenta)
            text_format = workbook.add_format({"num_format": "@"})
            money_format = workbook.add_format({"num_format": "#,##0.00"})

            # --- Formato Hoja Resumen ---
            ws_resumen.set_column("A:A", 20)  # Banco
            ws_resumen.set_column("B:C", 18, text_format)  # BankID, Cuenta
            ws_resumen.set_column("D:E", 10)  # Tipo, Moneda
            ws_resumen.set_column("F:F", 16, money_format)  # Saldo
            ws_resumen.set_column("G:G", 20)  # Fecha Saldo
            ws_resumen.set_column("H:H", 16, money_format)  # Saldo Disponible
            ws_resumen.set_column("I:I", 18)  # Num Transacciones
            ws_resumen.set_column("J:J", 18, money_format)  # Total
            ws_resumen.set_column("K:K", 30)  # Archivo

            # --- Formato Hoja Transacciones ---
            ws_transacciones.set_column("A:A", 18, text_format)  # Cuenta
            ws_transacciones.set_column("B:B", 8)  # Moneda
            ws_transacciones.set_column("C:C", 20)  # Fecha
            ws_transacciones.set_column("D:D", 24, text_format)  # FITID
            ws_transacciones.set_column("E:E", 14)  # Tipo
            ws_transacciones.set_column("F:G", 40)  # Nombre, Memo
            ws_transacciones.set_column("H:I", 14, text_format)  # Cheque, Referencia
            ws_transacciones.set_column("J:J", 15, money_format)  # Monto


def _format_date(value: date | datetime | None) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.strftime("%d/%m/%Y %H:%M:%S")
    return value.strftime("%d/%m/%Y")

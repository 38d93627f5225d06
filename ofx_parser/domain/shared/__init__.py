"""
Utilidades compartidas del dominio.

Funciones puras usadas por el parser OFX. No dependen de ninguna librería
externa; solo operan sobre tipos nativos de Python.

Uso:
    from ofx_parser.domain.shared.money import sanitize_currency, parse_amount
    from ofx_parser.domain.shared.date_parser import parse_ofx_date
    from ofx_parser.domain.shared.header_parser import parse_headers
    from ofx_parser.domain.shared.type_map import to_transaction_type
    from ofx_parser.domain.shared.text_cleaner import clean_ofx_body
"""

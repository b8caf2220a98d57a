import logging
import os
from collections import namedtuple
from io import BytesIO

import numpy as np
import pandas as pd

from warehouse_lookup.exceptions import SpreadsheetFormatError
from warehouse_lookup.models import Product
from warehouse_lookup.utils.constants import *

logger = logging.getLogger(__name__)

# Una regla por campo: columnas aceptadas (en orden), valor por defecto y conversión.
# Si el defecto es callable recibe la posición de la fila (empezando en 1).
FieldRule = namedtuple('FieldRule', ['field', 'aliases', 'default', 'coerce'])


class ImportProfile(namedtuple('ImportProfile', ['name', 'rules', 'keep_extra', 'identifier_key'])):
    """Reglas de normalización de un perfil de importación."""

    @property
    def has_zones(self):
        return any(rule.field == 'zone' for rule in self.rules)

    @property
    def known_columns(self):
        return {alias for rule in self.rules for alias in rule.aliases}


def _is_missing(value):
    return value is None or (pd.api.types.is_scalar(value) and pd.isna(value))


def is_filled(value):
    """Equivale a un valor 'verdadero': None, NaN, '', 0 y False cuentan como ausentes."""
    if isinstance(value, str):
        return value != ''
    if _is_missing(value):
        return False
    return bool(value)


def to_text(value):
    if isinstance(value, (np.integer, np.floating, np.bool_)):
        value = value.item()
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_number(value):
    """Convierte a número; lo no numérico o infinito queda en 0."""
    if isinstance(value, str):
        value = value.strip()
    elif isinstance(value, bool):
        value = int(value)
    try:
        number = pd.to_numeric(value, errors='coerce')
    except (TypeError, ValueError):
        return 0
    if pd.isna(number) or np.isinf(number):
        return 0
    number = number.item() if hasattr(number, 'item') else number
    if isinstance(number, float) and number.is_integer():
        return int(number)
    return number


def to_zone(value):
    return to_text(value).upper()


def _position(position):
    return position


ZONED_PROFILE = ImportProfile(
    name=PROFILE_ZONED,
    rules=(
        FieldRule('identifier', ZONED_ID_ALIASES, _position, to_text),
        FieldRule('name', ZONED_NAME_ALIASES, '', to_text),
        FieldRule('article', ZONED_ARTICLE_ALIASES, '', to_text),
        FieldRule('zone', ZONED_ZONE_ALIASES, DEFAULT_ZONE, to_zone),
        FieldRule('cell', ZONED_CELL_ALIASES, '', to_text),
        FieldRule('quantity', ZONED_QUANTITY_ALIASES, 0, to_number),
    ),
    keep_extra=False,
    identifier_key='id',
)

EXTENDED_PROFILE = ImportProfile(
    name=PROFILE_EXTENDED,
    rules=(
        FieldRule('identifier', EXTENDED_CODE_ALIASES, _position, to_text),
        FieldRule('article', EXTENDED_ARTICLE_ALIASES, '', to_text),
        FieldRule('name', EXTENDED_NAME_ALIASES, '', to_text),
        FieldRule('cell', EXTENDED_CELL_ALIASES, '', to_text),
    ),
    keep_extra=True,
    identifier_key='code',
)

PROFILES = {
    PROFILE_ZONED: ZONED_PROFILE,
    PROFILE_EXTENDED: EXTENDED_PROFILE,
}


def get_profile(name):
    try:
        return PROFILES[name]
    except KeyError:
        raise ValueError(f'Perfil desconocido: {name!r} (usar {", ".join(PROFILES)})')


def extract_field(row, rule, position):
    """Primer alias con valor en la fila; si ninguno, el defecto de la regla."""
    for alias in rule.aliases:
        value = row.get(alias)
        if is_filled(value):
            return rule.coerce(value)
    default = rule.default(position) if callable(rule.default) else rule.default
    return rule.coerce(default)


def _extra_fields(row, known_columns):
    extra = {}
    for column, value in row.items():
        if column in known_columns:
            continue
        if _is_missing(value):
            continue
        if isinstance(value, np.generic):
            value = value.item()
        extra[column] = value
    return extra


def normalize_row(row, position, profile=ZONED_PROFILE):
    values = {rule.field: extract_field(row, rule, position) for rule in profile.rules}
    if profile.keep_extra:
        values['extra'] = _extra_fields(row, profile.known_columns)
    return Product(**values)


def normalize_rows(rows, profile=ZONED_PROFILE):
    """Convierte filas (cabecera -> valor) en la secuencia ordenada de productos."""
    return [normalize_row(row, index + 1, profile) for index, row in enumerate(rows)]


def _engines_for(ext):
    # Si openpyxl falla, probar xlrd por si es .xls disfrazado de .xlsx (y viceversa)
    return ['openpyxl', 'xlrd'] if ext == '.xlsx' else ['xlrd', 'openpyxl']


def read_first_sheet(data, filename):
    """Lee la primera hoja del libro y devuelve sus filas como diccionarios.

    Las demás hojas se ignoran. Las filas totalmente vacías se descartan.
    Lanza SpreadsheetFormatError si el contenedor no es legible.
    """
    ext = os.path.splitext(filename)[1].lower()
    if ext not in ALLOWED_EXTENSIONS:
        raise SpreadsheetFormatError(filename, f'extensión no soportada ({ext or "sin extensión"})')

    file_bytes = BytesIO(data)
    errors = []
    df = None
    for engine in _engines_for(ext):
        try:
            file_bytes.seek(0)
            df = pd.read_excel(file_bytes, sheet_name=0, engine=engine, dtype=object)
            break
        except Exception as e:
            errors.append(f'{engine}: {type(e).__name__}: {e}')
            logger.warning('Lectura fallida con %s para %s: %s', engine, filename, e)

    if df is None:
        raise SpreadsheetFormatError(filename, '; '.join(errors))

    df.columns = df.columns.astype(str).str.strip()
    df = df.dropna(how='all')
    logger.info('Hoja leída: %s filas, columnas %s', len(df), df.columns.tolist())

    rows = []
    for record in df.to_dict('records'):
        rows.append({column: value for column, value in record.items() if not _is_missing(value)})
    return rows, df.columns.tolist()


def import_products(data, filename, profile=ZONED_PROFILE):
    rows, columns = read_first_sheet(data, filename)
    return normalize_rows(rows, profile), columns

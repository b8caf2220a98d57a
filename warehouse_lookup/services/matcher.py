import threading
from collections import namedtuple
from enum import Enum

LOOKUP_FIELDS = ('identifier', 'article')
CATALOG_FIELDS = ('article', 'name', 'cell')


class LookupState(str, Enum):
    EMPTY = 'empty'
    SEARCHING = 'searching'
    FOUND = 'found'
    NOT_FOUND = 'not_found'


LookupResult = namedtuple('LookupResult', ['query', 'state', 'product'])


def _matches(product, needle, fields):
    return any(needle in str(getattr(product, field, '')).lower() for field in fields)


def find_product(query, products, fields=LOOKUP_FIELDS):
    """Primer producto cuyo código o artículo contiene la consulta (sin mayúsculas).

    Una consulta vacía o solo con espacios no busca nada y devuelve None.
    """
    if not query or not query.strip():
        return None
    needle = query.lower()
    return next((p for p in products if _matches(p, needle, fields)), None)


def filter_catalog(query, products, fields=CATALOG_FIELDS):
    """Filtro del catálogo: todos los productos que coinciden, en orden original."""
    if not query:
        return list(products)
    needle = query.lower()
    return [p for p in products if _matches(p, needle, fields)]


class LookupSession:
    """Estado de la búsqueda de un usuario: EMPTY -> SEARCHING -> FOUND | NOT_FOUND.

    SEARCHING solo existe mientras se recorre la lista; lo publicado es siempre
    un LookupResult inmutable y completo.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._current = LookupResult('', LookupState.EMPTY, None)

    @property
    def current(self):
        with self._lock:
            return self._current

    @property
    def query(self):
        return self.current.query

    @property
    def state(self):
        return self.current.state

    @property
    def product(self):
        return self.current.product

    def update(self, query, products, fields=LOOKUP_FIELDS):
        query = query or ''
        if not query.strip():
            result = LookupResult(query, LookupState.EMPTY, None)
        else:
            product = find_product(query, products, fields)
            state = LookupState.FOUND if product is not None else LookupState.NOT_FOUND
            result = LookupResult(query, state, product)

        with self._lock:
            self._current = result
        return result

    def clear(self):
        return self.update('', ())

import logging
import os
import threading
import uuid
from datetime import datetime

from flask import current_app, session

from warehouse_lookup.exceptions import ProfileNotSupportedError, SpreadsheetFormatError
from warehouse_lookup.models import Notification, Zone
from warehouse_lookup.services.importer import get_profile, import_products, normalize_rows
from warehouse_lookup.services.matcher import LookupSession, filter_catalog
from warehouse_lookup.utils.constants import *

logger = logging.getLogger(__name__)

# Almacenamiento en memoria por sesión
# Estructura: session_id -> { 'store': ProductStore, 'lookup': LookupSession, 'metadata': {...} }
SESSIONS = {}
_sessions_lock = threading.Lock()

# Catálogo por defecto ya parseado: (ruta, mtime, perfil) -> productos
_DEFAULT_CATALOGS = {}
_default_catalog_lock = threading.Lock()


class ProductStore:
    """Dueño único de la lista de productos: se reemplaza entera o se lee entera."""

    def __init__(self, products=()):
        self._lock = threading.Lock()
        self._products = tuple(products)

    def replace_all(self, products):
        new_products = tuple(products)
        with self._lock:
            self._products = new_products
        return len(new_products)

    def snapshot(self):
        with self._lock:
            return self._products

    def __len__(self):
        return len(self.snapshot())


class InventoryService:
    @staticmethod
    def get_profile():
        return get_profile(current_app.config['LOOKUP_PROFILE'])

    @staticmethod
    def get_user_session():
        """Obtiene o crea el ID de sesión del usuario y retorna sus datos."""
        if 'user_id' not in session:
            session['user_id'] = str(uuid.uuid4())

        user_id = session['user_id']
        user_data = SESSIONS.get(user_id)
        if user_data is None:
            # Se prepara fuera del lock; si otra petición se adelantó, gana la suya
            user_data = InventoryService._new_user_data()
            with _sessions_lock:
                user_data = SESSIONS.setdefault(user_id, user_data)
        return user_data

    @staticmethod
    def _new_user_data():
        user_data = {
            'store': ProductStore(),
            'lookup': LookupSession(),
            'metadata': {
                'source': 'Sin datos',
                'upload_date': '-',
                'profile': current_app.config['LOOKUP_PROFILE']
            }
        }
        InventoryService._seed_catalog(user_data)
        return user_data

    @staticmethod
    def _load_default_catalog(default_file, profile):
        """Parsea el archivo por defecto una sola vez por versión (ruta, mtime, perfil)."""
        key = (os.path.abspath(default_file), os.path.getmtime(default_file), profile.name)
        with _default_catalog_lock:
            if key not in _DEFAULT_CATALOGS:
                with open(default_file, 'rb') as fh:
                    products, _ = import_products(fh.read(), default_file, profile)
                _DEFAULT_CATALOGS[key] = tuple(products)
                logger.info('Catálogo por defecto cargado: %s productos', len(products))
            return _DEFAULT_CATALOGS[key]

    @staticmethod
    def _seed_catalog(user_data):
        """Carga el archivo por defecto o, si no existe, el catálogo de ejemplo."""
        if not current_app.config.get('SEED_SAMPLE_CATALOG'):
            return

        profile = InventoryService.get_profile()
        default_file = current_app.config.get('DEFAULT_CATALOG_FILE')
        if default_file and os.path.exists(default_file):
            try:
                products = InventoryService._load_default_catalog(default_file, profile)
                user_data['store'].replace_all(products)
                user_data['metadata'].update({
                    'source': os.path.splitext(os.path.basename(default_file))[0],
                    'upload_date': datetime.now().strftime("%d/%m/%Y %H:%M")
                })
                return
            except (SpreadsheetFormatError, OSError) as e:
                logger.warning('Error cargando catálogo por defecto: %s', e)

        user_data['store'].replace_all(normalize_rows(SAMPLE_ROWS, profile))
        user_data['metadata']['source'] = 'Catálogo de ejemplo'

    @staticmethod
    def product_to_dict(product, profile=None):
        """Convierte un producto a diccionario serializable según el perfil."""
        profile = profile or InventoryService.get_profile()
        result = {
            profile.identifier_key: product.identifier,
            'article': product.article,
            'name': product.name,
            'cell': product.cell,
        }
        if profile.has_zones:
            result['zone'] = product.zone
            result['zone_known'] = product.zone_known
            result['quantity'] = product.quantity
        if profile.keep_extra:
            result['extra'] = dict(product.extra)
        return result

    @staticmethod
    def process_app_upload(file, filename):
        """Importa el archivo subido y reemplaza el catálogo de la sesión.

        Devuelve (notificación, número de productos, columnas). Si el archivo no
        se puede leer, el catálogo anterior queda intacto.
        """
        user_data = InventoryService.get_user_session()
        profile = InventoryService.get_profile()

        try:
            products, columns = import_products(file.read(), filename, profile)
        except SpreadsheetFormatError as e:
            logger.warning('Upload falló (%s): %s', filename, e.message)
            return Notification(MSG_ERROR_TITLE, MSG_ERROR_BODY, 'error'), None, []

        count = user_data['store'].replace_all(products)
        user_data['lookup'].clear()
        user_data['metadata'].update({
            'source': os.path.splitext(filename)[0],
            'upload_date': datetime.now().strftime("%d/%m/%Y %H:%M")
        })
        logger.info('Upload OK: %s productos desde %s', count, filename)
        return Notification(MSG_LOADED_TITLE, MSG_LOADED_BODY.format(count=count)), count, columns

    @staticmethod
    def lookup(query):
        user_data = InventoryService.get_user_session()
        return user_data['lookup'].update(query, user_data['store'].snapshot())

    @staticmethod
    def catalog(query):
        profile = InventoryService.get_profile()
        if not profile.has_zones:
            raise ProfileNotSupportedError('catalog', profile.name)
        user_data = InventoryService.get_user_session()
        return filter_catalog(query, user_data['store'].snapshot())

    @staticmethod
    def zone_summary():
        """Leyenda de zonas con el número de productos en cada una."""
        profile = InventoryService.get_profile()
        if not profile.has_zones:
            raise ProfileNotSupportedError('zones', profile.name)
        products = InventoryService.get_user_session()['store'].snapshot()

        counts = {zone: 0 for zone in Zone}
        for product in products:
            counts[Zone.parse(product.zone)] += 1

        return [
            {'zone': zone.value, 'label': zone.label, 'products': counts[zone]}
            for zone in Zone
            if zone is not Zone.UNKNOWN or counts[zone]
        ]

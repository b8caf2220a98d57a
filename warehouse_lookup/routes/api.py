from datetime import datetime

from flask import Blueprint, jsonify, request, session

from warehouse_lookup.exceptions import LookupAppError
from warehouse_lookup.services.inventory_service import InventoryService

api_bp = Blueprint('api', __name__, url_prefix='/api')


@api_bp.errorhandler(LookupAppError)
def handle_app_error(e):
    return jsonify(e.to_dict()), e.status_code


@api_bp.route('/metadata')
def get_metadata():
    user_data = InventoryService.get_user_session()
    return jsonify(user_data['metadata'])


@api_bp.route('/health')
def health_check():
    user_data = InventoryService.get_user_session()
    total = len(user_data['store'])
    return jsonify({
        'status': 'ok',
        'timestamp': datetime.now().isoformat(),
        'session_id': session.get('user_id'),
        'data_loaded': total > 0,
        'total_products': total
    })


@api_bp.route('/upload', methods=['POST'])
def upload_file():
    if 'file' not in request.files:
        return jsonify({'error': 'No file provided'}), 400

    file = request.files['file']
    if file.filename == '':
        return jsonify({'error': 'No file selected'}), 400

    # Obtener tamaño aproximado
    file.seek(0, 2)
    file_size = file.tell()
    file.seek(0)
    file_size_mb = round(file_size / (1024 * 1024), 2)

    notification, rows, columns = InventoryService.process_app_upload(file, file.filename)
    if rows is None:
        return jsonify({
            'error': notification.description,
            'notification': notification.to_dict()
        }), 400

    return jsonify({
        'success': True,
        'notification': notification.to_dict(),
        'columns': columns[:10],
        'total_rows': rows,
        'file_size_mb': file_size_mb
    })


@api_bp.route('/lookup')
def lookup_product():
    query = request.args.get('q', '')
    result = InventoryService.lookup(query)
    return jsonify({
        'state': result.state.value,
        'query': result.query,
        'product': InventoryService.product_to_dict(result.product) if result.product else None
    })


@api_bp.route('/catalog')
def get_catalog():
    query = request.args.get('q', '')
    products = InventoryService.catalog(query)
    profile = InventoryService.get_profile()
    results = [InventoryService.product_to_dict(p, profile) for p in products]
    return jsonify({
        'results': results,
        'total': len(InventoryService.get_user_session()['store']),
        'showing': len(results)
    })


@api_bp.route('/zones')
def get_zones():
    return jsonify(InventoryService.zone_summary())

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from warehouse_lookup.config import config


def create_app(config_name='default'):
    app = Flask(__name__)
    app.config.from_object(config[config_name])
    app.logger.setLevel(app.config['LOG_LEVEL'])

    CORS(app, supports_credentials=True)

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(e):
        return jsonify({'error': 'Archivo demasiado grande.'}), 413

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({'error': e.description}), e.code

    # Error handler global para excepciones no capturadas
    @app.errorhandler(Exception)
    def handle_exception(e):
        app.logger.exception('Unhandled error: %s', e)
        return jsonify({'error': f'Error interno del servidor: {str(e)}'}), 500

    from warehouse_lookup.routes.api import api_bp

    app.register_blueprint(api_bp)

    return app

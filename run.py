from warehouse_lookup import create_app
import os

app = create_app(os.getenv('FLASK_CONFIG') or 'default')

if __name__ == '__main__':
    app.logger.info("Servidor iniciando en http://localhost:5000 (perfil %s)", app.config['LOOKUP_PROFILE'])
    app.run(port=5000)

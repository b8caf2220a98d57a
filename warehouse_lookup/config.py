import os


class Config:
    """Configuración base de la aplicación."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'warehouse_lookup_secret_key'
    MAX_CONTENT_LENGTH = 50 * 1024 * 1024  # 50MB
    LOOKUP_PROFILE = os.environ.get('LOOKUP_PROFILE') or 'zoned'
    DEFAULT_CATALOG_FILE = os.environ.get('DEFAULT_CATALOG_FILE') or 'catalog.xlsx'
    SEED_SAMPLE_CATALOG = True
    LOG_LEVEL = (os.environ.get('LOG_LEVEL') or 'INFO').upper()
    SESSION_COOKIE_SAMESITE = 'Lax'
    SESSION_COOKIE_HTTPONLY = True
    DEBUG = False
    TESTING = False


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    TESTING = True
    SEED_SAMPLE_CATALOG = False
    DEFAULT_CATALOG_FILE = None


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

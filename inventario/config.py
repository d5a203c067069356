"""
Configuración Flask para el cliente web de Inventario
"""
import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Configuración base"""
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key')

    # API REST remota
    API_BASE_URL = os.getenv('API_BASE_URL', 'http://localhost:3000')
    API_TIMEOUT = float(os.getenv('API_TIMEOUT', 30))

    # Sesión (cookie firmada con el token y el usuario)
    SESSION_COOKIE_NAME = 'inventario_session'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    PERMANENT_SESSION_LIFETIME = timedelta(days=int(os.getenv('SESSION_LIFETIME_DAYS', 30)))

    # CORS
    _cors_origins = os.getenv('CORS_ORIGINS', 'http://localhost:5173')
    CORS_ORIGINS = ['*'] if _cors_origins == '*' else _cors_origins.split(',')


class DevelopmentConfig(Config):
    """Configuración de desarrollo"""
    DEBUG = True


class ProductionConfig(Config):
    """Configuración de producción"""
    DEBUG = False
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    """Configuración de tests"""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    API_BASE_URL = 'http://api.test'


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

import os


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-prod')
    
    # Database
    DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite:///leaderboard.db')
    SQLALCHEMY_DATABASE_URI = DATABASE_URL
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {'pool_pre_ping': True}
    
    # Run Alembic upgrade on startup; create_all() is used otherwise
    AUTO_MIGRATE = os.getenv('AUTO_MIGRATE', 'true').lower() == 'true'
    
    # Leaderboard defaults
    DEFAULT_PAGE = 1
    DEFAULT_PAGE_SIZE = int(os.getenv('DEFAULT_PAGE_SIZE', '100'))
    DEFAULT_TOP_COUNT = int(os.getenv('DEFAULT_TOP_COUNT', '10'))
    
    API_DOCS_ENABLED = False


class DevelopmentConfig(Config):
    DEBUG = True
    API_DOCS_ENABLED = True


class ProductionConfig(Config):
    DEBUG = False
    API_DOCS_ENABLED = False


class TestingConfig(Config):
    TESTING = True
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    AUTO_MIGRATE = False
    API_DOCS_ENABLED = True
    DEFAULT_PAGE_SIZE = 100
    DEFAULT_TOP_COUNT = 10


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

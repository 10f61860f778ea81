import os
import logging
from flask import Flask, jsonify
from flask_cors import CORS
from flask_migrate import Migrate, upgrade
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from .config import config
from .models import db
from .errors import LeaderboardError
from .leaderboard import LeaderboardService
from .api_docs import build_openapi_document

logger = logging.getLogger(__name__)

API_TITLE = 'Leaderboard API'
API_VERSION = '1.0.0'

MIGRATIONS_DIR = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    'migrations'
)

migrate = Migrate()


def create_app(config_name: str = None, bootstrap_schema: bool = True) -> Flask:
    """
    Application factory for the leaderboard service.
    
    Args:
        config_name: Key into the config mapping. Defaults to FLASK_ENV.
        bootstrap_schema: Migrate or create the schema before returning.
            Disabled by manage_db.py, which applies migrations itself.
    """
    if config_name is None:
        config_name = os.getenv('FLASK_ENV', 'development')
    
    app = Flask(__name__)
    app.config.from_object(config.get(config_name, config['default']))
    
    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db, directory=MIGRATIONS_DIR)
    CORS(app, send_wildcard=True)
    
    # Make sure the schema exists before serving traffic
    if bootstrap_schema:
        with app.app_context():
            init_schema(app)
    
    app.leaderboard = LeaderboardService()
    
    # Register routes
    from .routes import leaderboard
    app.register_blueprint(leaderboard.bp)
    register_error_handlers(app)
    register_api_routes(app)
    
    return app


def init_schema(app: Flask):
    """Bring the schema up to date (Alembic) or create tables directly."""
    dialect = db.engine.url.get_backend_name()
    if app.config.get('AUTO_MIGRATE'):
        logger.info(f"Applying migrations ({dialect})")
        upgrade()
    else:
        logger.info(f"Creating tables ({dialect})")
        db.create_all()


def register_error_handlers(app: Flask):
    """Map service errors and HTTP errors to JSON bodies."""
    
    @app.errorhandler(LeaderboardError)
    def handle_leaderboard_error(e: LeaderboardError):
        return jsonify(e.to_dict()), e.status_code
    
    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({'error': e.description}), e.code


def register_api_routes(app: Flask):
    """Register operational routes."""
    
    @app.route('/health')
    def health_check():
        """Health check endpoint."""
        try:
            db.session.execute(db.text('SELECT 1'))
            db_ok = True
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Health check failed: {e}")
            db_ok = False
        
        status = 'healthy' if db_ok else 'unhealthy'
        code = 200 if db_ok else 503
        
        return jsonify({
            'status': status,
            'database': 'connected' if db_ok else 'disconnected'
        }), code
    
    if app.config.get('API_DOCS_ENABLED'):
        @app.route('/api/openapi.json')
        def openapi_document():
            return jsonify(build_openapi_document(API_TITLE, API_VERSION))

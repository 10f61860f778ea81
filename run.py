#!/usr/bin/env python3
"""
Entry point for the Leaderboard Service.

Usage:
    python run.py

Environment Variables:
    FLASK_ENV: development or production (default: development)
    PORT: Port to run on (default: 5000)
    DATABASE_URL: SQLAlchemy database URL (default: sqlite:///leaderboard.db)
    LOG_LEVEL: Logging level (default: INFO)
"""
import os
import logging


def run_service():
    """Run the leaderboard service."""
    from leaderboard_service.app import create_app
    
    logging.basicConfig(
        level=os.getenv('LOG_LEVEL', 'INFO').upper(),
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
    )
    
    app = create_app()
    port = int(os.getenv('PORT', 5000))
    debug = os.getenv('FLASK_ENV', 'development') == 'development'
    
    logging.getLogger(__name__).info(f"Starting Leaderboard Service on port {port}...")
    app.run(host='0.0.0.0', port=port, debug=debug, threaded=True)


if __name__ == '__main__':
    run_service()

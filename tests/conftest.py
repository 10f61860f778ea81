"""
Pytest configuration and fixtures for leaderboard service tests.
"""
import os
import sys
from datetime import datetime, timedelta

import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

# Set testing environment before importing app
os.environ['FLASK_ENV'] = 'testing'

from leaderboard_service.app import create_app
from leaderboard_service.models import db, LeaderboardEntry


BASE_TIME = datetime(2026, 1, 1, 12, 0, 0)


@pytest.fixture(scope='session')
def app():
    """Create application for testing."""
    app = create_app('testing')
    
    with app.app_context():
        db.create_all()
        yield app
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def db_session(app):
    """Create database session for testing."""
    with app.app_context():
        # Clear all tables before each test
        db.session.remove()
        
        for table in reversed(db.metadata.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()
        
        yield db.session
        
        db.session.rollback()


@pytest.fixture
def make_entry(app, db_session):
    """Factory inserting an entry directly, with control over dateCompleted."""
    def _make_entry(player_name, score, level='L1', minutes=0):
        entry = LeaderboardEntry(
            player_name=player_name,
            score=score,
            level=level,
            date_completed=BASE_TIME + timedelta(minutes=minutes)
        )
        db.session.add(entry)
        db.session.commit()
        db.session.refresh(entry)
        return entry
    
    return _make_entry


@pytest.fixture
def ranked_entries(make_entry):
    """Three entries ranked A:300, B:200, C:100."""
    return [
        make_entry('A', 300, minutes=2),
        make_entry('C', 100, minutes=0),
        make_entry('B', 200, minutes=1),
    ]


@pytest.fixture
def tied_entries(make_entry):
    """Entries sharing a score, completed at different times."""
    return [
        make_entry('Late', 500, minutes=10),
        make_entry('Early', 500, minutes=1),
        make_entry('Middle', 500, minutes=5),
        make_entry('Best', 900, minutes=20),
    ]

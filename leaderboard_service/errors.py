"""
Error taxonomy for the leaderboard service.

Each error carries the HTTP status it maps to; the handlers registered in
``create_app`` turn them into JSON responses.
"""
from typing import Dict, List, Optional


class LeaderboardError(Exception):
    """Base class for errors surfaced to API callers."""
    
    status_code = 500
    message = 'Internal server error'
    
    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        if message:
            self.message = message
    
    def to_dict(self) -> dict:
        return {'error': self.message}


class ValidationFailed(LeaderboardError):
    """Input failed required-field, length or range constraints."""
    
    status_code = 400
    message = 'Validation failed'
    
    def __init__(self, errors: Dict[str, List[str]], message: Optional[str] = None):
        super().__init__(message)
        self.errors = errors
    
    def to_dict(self) -> dict:
        return {'error': self.message, 'errors': self.errors}


class EntryNotFound(LeaderboardError):
    """No entry exists with the requested id."""
    
    status_code = 404
    message = 'Entry not found'
    
    def __init__(self, entry_id: Optional[int] = None):
        super().__init__()
        self.entry_id = entry_id


class StoreError(LeaderboardError):
    """The database could not execute a query or mutation."""
    
    status_code = 500
    message = 'Database error'

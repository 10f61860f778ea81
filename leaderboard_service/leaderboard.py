import logging
from functools import wraps
from typing import List, Optional, Tuple

from flask import current_app
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from .errors import StoreError
from .models import db, LeaderboardEntry, MAX_DB_INT, fold_player_name, utcnow
from .schemas import LeaderboardEntryInput

logger = logging.getLogger(__name__)


def store_operation(func_):
    """Roll back and re-raise SQLAlchemy failures as StoreError."""
    @wraps(func_)
    def wrapper(*args, **kwargs):
        try:
            return func_(*args, **kwargs)
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Store failure in {func_.__name__}: {e}", exc_info=True)
            raise StoreError() from e
    return wrapper


def normalize_pagination(
    page: Optional[int],
    page_size: Optional[int],
    default_page: int,
    default_page_size: int
) -> Tuple[int, int]:
    """Replace missing or out-of-range paging values with the defaults."""
    if page is None or page < 1:
        if page is not None:
            logger.warning(f"Invalid page {page}, using {default_page}")
        page = default_page
    if page_size is None or page_size < 1:
        if page_size is not None:
            logger.warning(f"Invalid pageSize {page_size}, using {default_page_size}")
        page_size = default_page_size
    return page, min(page_size, MAX_DB_INT)


def is_storable_id(entry_id: int) -> bool:
    """Ids outside the INTEGER primary key range can never exist."""
    return 1 <= entry_id <= MAX_DB_INT


class LeaderboardService:
    """
    Query and mutation contract for leaderboard entries:
    - Ranked listing (score desc, earlier completion first on ties)
    - Lookup, creation and deletion by id
    - Top-N and per-player views
    
    Entries are never updated once written. Paging and top-N defaults
    come from the DEFAULT_* settings of the current app.
    """
    
    @staticmethod
    def _ranked():
        return LeaderboardEntry.query.order_by(
            LeaderboardEntry.score.desc(),
            LeaderboardEntry.date_completed.asc()
        )
    
    @store_operation
    def list_entries(
        self,
        page: Optional[int] = None,
        page_size: Optional[int] = None
    ) -> List[LeaderboardEntry]:
        """Return one page of the ranked leaderboard."""
        page, page_size = normalize_pagination(
            page,
            page_size,
            default_page=current_app.config['DEFAULT_PAGE'],
            default_page_size=current_app.config['DEFAULT_PAGE_SIZE']
        )
        offset = (page - 1) * page_size
        if offset > MAX_DB_INT:
            return []
        return self._ranked().offset(offset).limit(page_size).all()
    
    @store_operation
    def get_entry(self, entry_id: int) -> Optional[LeaderboardEntry]:
        """Get an entry by id."""
        if not is_storable_id(entry_id):
            return None
        return db.session.get(LeaderboardEntry, entry_id)
    
    @store_operation
    def create_entry(self, entry_input: LeaderboardEntryInput) -> LeaderboardEntry:
        """Persist a validated entry, stamping dateCompleted with the current UTC time."""
        entry = LeaderboardEntry(
            player_name=entry_input.player_name,
            score=entry_input.score,
            level=entry_input.level,
            date_completed=utcnow()
        )
        
        db.session.add(entry)
        db.session.commit()
        
        logger.info(f"Created entry {entry.id} for {entry.player_name} ({entry.score})")
        return entry
    
    @store_operation
    def delete_entry(self, entry_id: int) -> bool:
        """Delete an entry. Returns False if it does not exist."""
        if not is_storable_id(entry_id):
            return False
        
        entry = db.session.get(LeaderboardEntry, entry_id)
        if not entry:
            return False
        
        db.session.delete(entry)
        db.session.commit()
        
        logger.info(f"Deleted entry {entry_id}")
        return True
    
    @store_operation
    def top_scores(self, count: Optional[int] = None) -> List[LeaderboardEntry]:
        """Return up to `count` best entries; non-positive counts yield nothing."""
        if count is None:
            count = current_app.config['DEFAULT_TOP_COUNT']
        if count <= 0:
            return []
        return self._ranked().limit(min(count, MAX_DB_INT)).all()
    
    @store_operation
    def player_scores(self, player_name: str) -> List[LeaderboardEntry]:
        """All entries for a player, matched case-insensitively, best score first."""
        return LeaderboardEntry.query.filter(
            LeaderboardEntry.player_key == fold_player_name(player_name)
        ).order_by(LeaderboardEntry.score.desc()).all()
    
    @store_operation
    def count(self) -> int:
        """Number of stored entries."""
        return db.session.query(func.count(LeaderboardEntry.id)).scalar()

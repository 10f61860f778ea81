from datetime import datetime, timezone
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.orm import validates

db = SQLAlchemy()

PLAYER_NAME_MAX_LENGTH = 100
LEVEL_MAX_LENGTH = 50

# Largest value an INTEGER column or LIMIT/OFFSET parameter accepts
MAX_DB_INT = 2_147_483_647


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, the form stored in the table."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def fold_player_name(player_name: str) -> str:
    """Case-insensitive lookup key for a player name."""
    return player_name.casefold()


class LeaderboardEntry(db.Model):
    __tablename__ = 'leaderboard_entries'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    player_name = db.Column(db.String(PLAYER_NAME_MAX_LENGTH), nullable=False)
    # casefolded player_name; SQL lower() only folds ASCII on SQLite
    player_key = db.Column(db.String(PLAYER_NAME_MAX_LENGTH), nullable=False)
    score = db.Column(db.Integer, nullable=False)
    level = db.Column(db.String(LEVEL_MAX_LENGTH), nullable=False)
    date_completed = db.Column(db.DateTime, nullable=False, default=utcnow)

    __table_args__ = (
        db.Index('ix_leaderboard_entries_score', score.desc()),
        db.Index('ix_leaderboard_entries_date_completed', date_completed),
        db.Index('ix_leaderboard_entries_player_key', player_key),
    )

    @validates('player_name')
    def _set_player_key(self, key, value):
        self.player_key = fold_player_name(value)
        return value

    def to_dict(self):
        date_completed = None
        if self.date_completed:
            date_completed = self.date_completed.replace(tzinfo=timezone.utc).isoformat()

        return {
            'id': self.id,
            'playerName': self.player_name,
            'score': self.score,
            'level': self.level,
            'dateCompleted': date_completed,
        }

    def __repr__(self):
        return f'<LeaderboardEntry {self.id} {self.player_name}={self.score}>'

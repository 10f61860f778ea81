"""
Request/response schemas for the leaderboard API.

The input schema is kept apart from the ``LeaderboardEntry`` table so that
``id`` and ``dateCompleted`` can never be supplied by a caller.
"""
from datetime import datetime
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError

from .errors import ValidationFailed
from .models import PLAYER_NAME_MAX_LENGTH, LEVEL_MAX_LENGTH, MAX_DB_INT

# Upper bound of the INTEGER score column
MAX_SCORE = MAX_DB_INT


class LeaderboardEntryInput(BaseModel):
    """Fields a caller may supply when recording a score."""
    
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, extra='ignore')
    
    player_name: str = Field(alias='playerName', min_length=1, max_length=PLAYER_NAME_MAX_LENGTH)
    score: StrictInt = Field(ge=0, le=MAX_SCORE)
    level: str = Field(min_length=1, max_length=LEVEL_MAX_LENGTH)


class LeaderboardEntryOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    
    id: int
    player_name: str = Field(alias='playerName')
    score: int
    level: str
    date_completed: datetime = Field(alias='dateCompleted')


class ErrorResponse(BaseModel):
    error: str


class ValidationErrorResponse(BaseModel):
    error: str
    errors: Dict[str, List[str]]


def validate_entry_input(data: Any) -> LeaderboardEntryInput:
    """
    Validate a decoded JSON body against LeaderboardEntryInput.
    
    Raises:
        ValidationFailed: with messages grouped by wire field name
    """
    if not isinstance(data, dict):
        raise ValidationFailed({'body': ['Request body must be a JSON object']})
    
    try:
        return LeaderboardEntryInput.model_validate(data)
    except ValidationError as e:
        errors: Dict[str, List[str]] = {}
        for err in e.errors():
            field = str(err['loc'][0]) if err['loc'] else 'body'
            errors.setdefault(field, []).append(err['msg'])
        raise ValidationFailed(errors) from e

"""
Unit tests for input validation.
Tests: validate_entry_input, LeaderboardEntryInput constraints
"""
import pytest

from leaderboard_service.errors import ValidationFailed
from leaderboard_service.schemas import validate_entry_input, MAX_SCORE


def valid_body(**overrides):
    body = {'playerName': 'Sam', 'score': 500, 'level': 'L1'}
    body.update(overrides)
    return body


class TestValidInput:
    """Inputs that should be accepted."""
    
    def test_valid_body(self):
        entry = validate_entry_input(valid_body())
        
        assert entry.player_name == 'Sam'
        assert entry.score == 500
        assert entry.level == 'L1'
    
    def test_zero_score(self):
        assert validate_entry_input(valid_body(score=0)).score == 0
    
    def test_max_score(self):
        assert validate_entry_input(valid_body(score=MAX_SCORE)).score == MAX_SCORE
    
    def test_whitespace_stripped(self):
        entry = validate_entry_input(valid_body(playerName='  Sam  ', level=' L1 '))
        
        assert entry.player_name == 'Sam'
        assert entry.level == 'L1'
    
    def test_length_limits(self):
        entry = validate_entry_input(valid_body(playerName='p' * 100, level='l' * 50))
        
        assert len(entry.player_name) == 100
        assert len(entry.level) == 50
    
    def test_server_fields_ignored(self):
        """id and dateCompleted should never be taken from the caller."""
        entry = validate_entry_input(valid_body(id=42, dateCompleted='2000-01-01T00:00:00'))
        
        assert not hasattr(entry, 'id')
        assert 'dateCompleted' not in entry.model_dump(by_alias=True)


class TestInvalidInput:
    """Inputs that should be rejected with per-field errors."""
    
    def test_negative_score(self):
        with pytest.raises(ValidationFailed) as exc_info:
            validate_entry_input(valid_body(score=-1))
        
        assert list(exc_info.value.errors) == ['score']
    
    def test_score_above_range(self):
        with pytest.raises(ValidationFailed) as exc_info:
            validate_entry_input(valid_body(score=MAX_SCORE + 1))
        
        assert 'score' in exc_info.value.errors
    
    @pytest.mark.parametrize('score', ['500', 12.5, True, None])
    def test_non_integer_score(self, score):
        with pytest.raises(ValidationFailed) as exc_info:
            validate_entry_input(valid_body(score=score))
        
        assert 'score' in exc_info.value.errors
    
    def test_missing_fields(self):
        with pytest.raises(ValidationFailed) as exc_info:
            validate_entry_input({})
        
        assert set(exc_info.value.errors) == {'playerName', 'score', 'level'}
    
    def test_blank_player_name(self):
        with pytest.raises(ValidationFailed) as exc_info:
            validate_entry_input(valid_body(playerName='   '))
        
        assert 'playerName' in exc_info.value.errors
    
    def test_player_name_too_long(self):
        with pytest.raises(ValidationFailed) as exc_info:
            validate_entry_input(valid_body(playerName='p' * 101))
        
        assert 'playerName' in exc_info.value.errors
    
    def test_level_too_long(self):
        with pytest.raises(ValidationFailed) as exc_info:
            validate_entry_input(valid_body(level='l' * 51))
        
        assert 'level' in exc_info.value.errors
    
    def test_non_string_level(self):
        with pytest.raises(ValidationFailed) as exc_info:
            validate_entry_input(valid_body(level=3))
        
        assert 'level' in exc_info.value.errors
    
    @pytest.mark.parametrize('body', [None, [], 'Sam', 500])
    def test_non_object_body(self, body):
        with pytest.raises(ValidationFailed) as exc_info:
            validate_entry_input(body)
        
        assert list(exc_info.value.errors) == ['body']
    
    def test_error_payload(self):
        with pytest.raises(ValidationFailed) as exc_info:
            validate_entry_input(valid_body(score=-1))
        
        payload = exc_info.value.to_dict()
        assert payload['error'] == 'Validation failed'
        assert isinstance(payload['errors']['score'], list)
        assert payload['errors']['score']

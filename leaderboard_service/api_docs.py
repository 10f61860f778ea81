"""OpenAPI document for the leaderboard endpoints."""
from .schemas import (
    LeaderboardEntryInput,
    LeaderboardEntryOut,
    ErrorResponse,
    ValidationErrorResponse,
)

REF = '#/components/schemas/{model}'


def _ref(name: str) -> dict:
    return {'$ref': REF.format(model=name)}


def _json(schema: dict) -> dict:
    return {'content': {'application/json': {'schema': schema}}}


def _entry_list() -> dict:
    return _json({'type': 'array', 'items': _ref('LeaderboardEntry')})


def _components() -> dict:
    schemas = {}
    for name, model in (
        ('LeaderboardEntryInput', LeaderboardEntryInput),
        ('LeaderboardEntry', LeaderboardEntryOut),
        ('ErrorResponse', ErrorResponse),
        ('ValidationErrorResponse', ValidationErrorResponse),
    ):
        schema = model.model_json_schema(by_alias=True, ref_template=REF)
        schemas.update(schema.pop('$defs', {}))
        schema['title'] = name
        schemas[name] = schema
    return {'schemas': schemas}


def build_openapi_document(title: str, version: str) -> dict:
    entry_id = {'name': 'entry_id', 'in': 'path', 'required': True, 'schema': {'type': 'integer'}}
    not_found = {'description': 'Entry not found', **_json(_ref('ErrorResponse'))}
    
    return {
        'openapi': '3.0.3',
        'info': {'title': title, 'version': version},
        'paths': {
            '/api/leaderboard': {
                'get': {
                    'summary': 'Ranked leaderboard page',
                    'parameters': [
                        {'name': 'page', 'in': 'query', 'schema': {'type': 'integer', 'default': 1}},
                        {'name': 'pageSize', 'in': 'query', 'schema': {'type': 'integer', 'default': 100}},
                    ],
                    'responses': {'200': {'description': 'Entries', **_entry_list()}},
                },
                'post': {
                    'summary': 'Record a score',
                    'requestBody': {'required': True, **_json(_ref('LeaderboardEntryInput'))},
                    'responses': {
                        '201': {'description': 'Created', **_json(_ref('LeaderboardEntry'))},
                        '400': {'description': 'Validation failed', **_json(_ref('ValidationErrorResponse'))},
                    },
                },
            },
            '/api/leaderboard/{entry_id}': {
                'get': {
                    'summary': 'Get an entry',
                    'parameters': [entry_id],
                    'responses': {
                        '200': {'description': 'Entry', **_json(_ref('LeaderboardEntry'))},
                        '404': not_found,
                    },
                },
                'delete': {
                    'summary': 'Delete an entry',
                    'parameters': [entry_id],
                    'responses': {'204': {'description': 'Deleted'}, '404': not_found},
                },
            },
            '/api/leaderboard/top/{count}': {
                'get': {
                    'summary': 'Best scores',
                    'parameters': [
                        {'name': 'count', 'in': 'path', 'required': True, 'schema': {'type': 'integer', 'default': 10}},
                    ],
                    'responses': {'200': {'description': 'Entries', **_entry_list()}},
                },
            },
            '/api/leaderboard/player/{playerName}': {
                'get': {
                    'summary': 'Scores for one player (case-insensitive)',
                    'parameters': [
                        {'name': 'playerName', 'in': 'path', 'required': True, 'schema': {'type': 'string'}},
                    ],
                    'responses': {'200': {'description': 'Entries', **_entry_list()}},
                },
            },
        },
        'components': _components(),
    }

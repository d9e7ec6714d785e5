"""argument checks run before the engine touches any rating"""
import math
import numbers
import numpy as np
from wlrate.core.errors import InvalidArgument
from wlrate.rating import Rating

SEQUENCE_TYPES = (list, tuple, np.ndarray)


def is_number(value) -> bool:
    """booleans are integers to python but not numbers to us"""
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def validate_teams(teams):
    if not isinstance(teams, SEQUENCE_TYPES):
        raise InvalidArgument(f'teams must be a list of teams, got {type(teams).__name__}')
    if len(teams) < 2:
        raise InvalidArgument(f'must have at least 2 teams, got {len(teams)}')
    for idx, team in enumerate(teams):
        if not isinstance(team, SEQUENCE_TYPES):
            raise InvalidArgument(f'team {idx} must be a list of ratings, got {type(team).__name__}')
        if len(team) == 0:
            raise InvalidArgument(f'team {idx} must have at least 1 player')
        for player in team:
            if not isinstance(player, Rating):
                raise InvalidArgument(f'all players must be Rating objects, got {type(player).__name__}')


def validate_vector(teams, values, label):
    """ranks and scores: one number per team"""
    if not isinstance(values, SEQUENCE_TYPES):
        raise InvalidArgument(f'{label} must be a list, got {type(values).__name__}')
    if len(values) != len(teams):
        raise InvalidArgument(f'{label} must have the same length as teams ({len(values)} != {len(teams)})')
    for value in values:
        if not is_number(value):
            raise InvalidArgument(f'all {label} must be numeric, got {type(value).__name__}')
        if not math.isfinite(value):
            raise InvalidArgument(f'{label} must be finite numbers, got {value!r}')


def validate_weights(teams, weights):
    """weights: one number per player"""
    if not isinstance(weights, SEQUENCE_TYPES):
        raise InvalidArgument(f'weights must be a list, got {type(weights).__name__}')
    if len(weights) != len(teams):
        raise InvalidArgument(f'weights must have the same length as teams ({len(weights)} != {len(teams)})')
    for idx, team_weights in enumerate(weights):
        if not isinstance(team_weights, SEQUENCE_TYPES):
            raise InvalidArgument(f'weights for team {idx} must be a list')
        if len(team_weights) != len(teams[idx]):
            raise InvalidArgument(f'weights for team {idx} must match the team size')
        for weight in team_weights:
            if not is_number(weight):
                raise InvalidArgument(f'all weights must be numeric, got {type(weight).__name__}')
            if not math.isfinite(weight):
                raise InvalidArgument(f'weights must be finite numbers, got {weight!r}')


def validate_match(teams, ranks=None, scores=None, weights=None):
    """complete pre-pass for calculate_ratings"""
    validate_teams(teams)
    if ranks is not None and scores is not None:
        raise InvalidArgument('cannot provide both ranks and scores')
    if ranks is not None:
        validate_vector(teams, ranks, 'ranks')
    if scores is not None:
        validate_vector(teams, scores, 'scores')
    if weights is not None:
        validate_weights(teams, weights)


def validate_rating_payload(payload):
    """a serialized rating is exactly [mu, sigma]"""
    if not isinstance(payload, (list, tuple)):
        raise InvalidArgument(f'rating must be a list of [mu, sigma], got {type(payload).__name__}')
    if len(payload) != 2:
        raise InvalidArgument(f'rating must have exactly 2 elements, got {len(payload)}')
    if not all(is_number(value) for value in payload):
        raise InvalidArgument('rating values must be numeric')
    if not all(math.isfinite(value) for value in payload):
        raise InvalidArgument(f'rating values must be finite numbers, got {list(payload)!r}')

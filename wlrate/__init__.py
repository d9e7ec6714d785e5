"""Weng-Lin Bayesian rating models: Plackett-Luce, Bradley-Terry and Thurstone-Mosteller"""
from wlrate.configs import ModelConfig
from wlrate.core.base import RatingModel
from wlrate.core.errors import InvalidArgument
from wlrate.models import MODELS
from wlrate.rating import Rating, TeamRating

__version__ = '0.1.0'

__all__ = [
    'InvalidArgument',
    'MODELS',
    'ModelConfig',
    'Rating',
    'RatingModel',
    'TeamRating',
]

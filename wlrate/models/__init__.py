"""
Models Module
=============

This module contains the update rules of the Weng-Lin family of Bayesian online rating systems. All
of them share one update skeleton (see wlrate.core.base.RatingModel) and differ only in how teams are
compared and which closed form statistical functions are used.

Included Rating Models:
- Plackett-Luce: Scores each team against the whole field at once with a softmax over team strengths.
  The default, it scales to many team fields without pairwise enumeration.
- Bradley-Terry Full: Logistic pairwise comparisons against every other team.
- Bradley-Terry Part: Logistic pairwise comparisons against teams within a window of ranks.
- Thurstone-Mosteller Full: Gaussian pairwise comparisons using truncated gaussian moments, with an
  epsilon draw margin.
- Thurstone-Mosteller Part: The windowed variant of Thurstone-Mosteller.

MODELS maps each model name to its update rule. Rules are stateless and shared between models.
"""
from wlrate.models.plackett_luce import plackett_luce
from wlrate.models.weng_lin import (
    bradley_terry_full,
    bradley_terry_part,
    thurstone_mosteller_full,
    thurstone_mosteller_part,
)

MODELS = {
    'plackett_luce': plackett_luce,
    'bradley_terry_full': bradley_terry_full,
    'bradley_terry_part': bradley_terry_part,
    'thurstone_mosteller_full': thurstone_mosteller_full,
    'thurstone_mosteller_part': thurstone_mosteller_part,
}

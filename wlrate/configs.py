"""model configuration"""
import math
import numbers
from dataclasses import dataclass
from typing import Callable, Optional
from wlrate.core.errors import InvalidArgument
from wlrate.utils.constants import (
    DEFAULT_MU,
    DEFAULT_SIGMA,
    DEFAULT_BETA,
    DEFAULT_KAPPA,
    DEFAULT_TAU,
    DEFAULT_MARGIN,
    DEFAULT_EPSILON,
    DEFAULT_WINDOW_SIZE,
)


@dataclass(frozen=True)
class ModelConfig:
    """
    Immutable parameters shared by every rating model.

    Attributes:
        mu (float): initial mean of new ratings.
        sigma (float): initial standard deviation of new ratings.
        beta (float): performance variability, the noise in match outcomes given skill.
        kappa (float): floor on the variance shrink multiplier.
        tau (float): skill drift added to every sigma before each match.
        margin (float): score gap beyond which a win counts as impressive, 0 disables it.
        epsilon (float): draw margin, only read by the Thurstone-Mosteller models.
        window_size (int): opponents on each side compared against, only read by the Part models.
        limit_sigma (bool): never let a sigma grow over the course of a match.
        balance (bool): weight teammates further below the team's best player more heavily.
        gamma (callable, optional): gamma(c, num_teams, mu, sigma_squared, team, rank, weights),
            None selects the model's default.
    """

    mu: float = DEFAULT_MU
    sigma: float = DEFAULT_SIGMA
    beta: float = DEFAULT_BETA
    kappa: float = DEFAULT_KAPPA
    tau: float = DEFAULT_TAU
    margin: float = DEFAULT_MARGIN
    epsilon: float = DEFAULT_EPSILON
    window_size: int = DEFAULT_WINDOW_SIZE
    limit_sigma: bool = False
    balance: bool = False
    gamma: Optional[Callable] = None

    def __post_init__(self):
        for field_name in ('mu', 'sigma', 'beta', 'kappa', 'tau', 'margin', 'epsilon'):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
                raise InvalidArgument(f'{field_name} must be a finite number, got {value!r}')
            # frozen, so go through object.__setattr__ to store the float
            object.__setattr__(self, field_name, float(value))
        if self.sigma <= 0.0 or self.beta <= 0.0:
            raise InvalidArgument('sigma and beta must be positive')
        for field_name in ('kappa', 'tau', 'margin', 'epsilon'):
            if getattr(self, field_name) < 0.0:
                raise InvalidArgument(f'{field_name} must be non-negative')
        if isinstance(self.window_size, bool) or not isinstance(self.window_size, numbers.Integral):
            raise InvalidArgument(f'window_size must be an integer, got {self.window_size!r}')
        if self.window_size < 1:
            raise InvalidArgument(f'window_size must be at least 1, got {self.window_size}')
        if self.gamma is not None and not callable(self.gamma):
            raise InvalidArgument('gamma must be callable')

    @property
    def beta_squared(self) -> float:
        return self.beta**2.0

    @property
    def two_beta_squared(self) -> float:
        return 2.0 * (self.beta**2.0)

"""value objects for player and team skill beliefs"""
import math
import uuid
from wlrate.core.errors import InvalidArgument


class Rating:
    """
    A gaussian belief over one player's skill.

    Ratings compare by their ordinal (a conservative skill estimate) and are equal when mu and sigma
    match. The id token is carried through every copy the engine makes so that a rating can be
    correlated with its updated version; it plays no part in equality, ordering or hashing.

    Attributes:
        mu (float): mean of the skill belief.
        sigma (float): standard deviation of the skill belief, always positive.
        name (str, optional): display name.
        id (str): opaque identity token.
    """

    __slots__ = ('mu', 'sigma', 'name', 'id')

    def __init__(self, mu: float, sigma: float, name: str = None, id: str = None):
        mu = float(mu)
        sigma = float(sigma)
        if not (math.isfinite(mu) and math.isfinite(sigma)):
            raise InvalidArgument(f'mu and sigma must be finite, got mu={mu}, sigma={sigma}')
        if sigma <= 0.0:
            raise InvalidArgument(f'sigma must be positive, got {sigma}')
        self.mu = mu
        self.sigma = sigma
        self.name = name
        self.id = id if id is not None else uuid.uuid4().hex

    def copy(self, mu: float = None, sigma: float = None) -> 'Rating':
        """return a new rating with the same name and id, optionally with a new mu and/or sigma"""
        return Rating(
            mu=self.mu if mu is None else mu,
            sigma=self.sigma if sigma is None else sigma,
            name=self.name,
            id=self.id,
        )

    def ordinal(self, z: float = 3.0, alpha: float = 1.0, target: float = 0.0) -> float:
        """
        A conservative scalar estimate of skill, by default mu - 3 * sigma.

        Parameters:
            z (float): number of standard deviations subtracted from mu.
            alpha (float): scaling factor applied to the result.
            target (float): offset added after scaling.
        """
        return alpha * ((self.mu - z * self.sigma) + (target / alpha))

    def to_list(self):
        return [self.mu, self.sigma]

    def _check_other(self, other):
        if not isinstance(other, Rating):
            raise InvalidArgument(f'cannot compare Rating with {type(other).__name__}')

    def __lt__(self, other):
        self._check_other(other)
        return self.ordinal() < other.ordinal()

    def __le__(self, other):
        self._check_other(other)
        return self.ordinal() <= other.ordinal()

    def __gt__(self, other):
        self._check_other(other)
        return self.ordinal() > other.ordinal()

    def __ge__(self, other):
        self._check_other(other)
        return self.ordinal() >= other.ordinal()

    def __eq__(self, other):
        if not isinstance(other, Rating):
            return False
        return self.mu == other.mu and self.sigma == other.sigma

    def __hash__(self):
        return hash((self.mu, self.sigma))

    def __repr__(self):
        name = f', name={self.name!r}' if self.name is not None else ''
        return f'Rating(mu={self.mu}, sigma={self.sigma}{name})'


class TeamRating:
    """aggregate belief for one team, only lives for the duration of a single engine call"""

    __slots__ = ('mu', 'sigma_squared', 'team', 'rank')

    def __init__(self, mu: float, sigma_squared: float, team: list, rank: float):
        self.mu = float(mu)
        self.sigma_squared = float(sigma_squared)
        self.team = team
        self.rank = float(rank)

    def __repr__(self):
        return f'TeamRating(mu={self.mu}, sigma_squared={self.sigma_squared}, rank={self.rank})'

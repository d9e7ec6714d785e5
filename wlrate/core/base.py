"""the shared update skeleton and prediction routines of every rating model"""
import itertools
import logging
import math
from typing import Callable, List, Optional
import numpy as np
from scipy.stats import norm
from wlrate.configs import ModelConfig
from wlrate.core.errors import InvalidArgument
from wlrate.core.validation import is_number, validate_match, validate_rating_payload, validate_teams
from wlrate.models import MODELS
from wlrate.rating import Rating, TeamRating
from wlrate.utils import normal
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
from wlrate.utils.math_utils import matrix_transpose, normalize, unwind

logger = logging.getLogger(__name__)


class RatingModel:
    """
    A Weng-Lin Bayesian rating model. This class owns the parts every model shares: validation,
    tau decay, rank and score normalization, team aggregation, the per player update, sigma limiting
    and the prediction routines. The comparison itself is delegated to the update rule registered
    under the model name in wlrate.models.MODELS.

    A model holds no per-call state. calculate_ratings never mutates the ratings it is given and
    returns new Rating objects instead, so one model can be shared between threads.

    Attributes:
        model (str): name of the update rule.
        rule: the update rule, exposes team_updates() and default_gamma.
        config (ModelConfig): immutable model parameters.
    """

    def __init__(
        self,
        model: str = 'plackett_luce',
        mu: float = DEFAULT_MU,
        sigma: float = DEFAULT_SIGMA,
        beta: float = DEFAULT_BETA,
        kappa: float = DEFAULT_KAPPA,
        tau: float = DEFAULT_TAU,
        margin: float = DEFAULT_MARGIN,
        epsilon: float = DEFAULT_EPSILON,
        window_size: int = DEFAULT_WINDOW_SIZE,
        limit_sigma: bool = False,
        balance: bool = False,
        gamma: Optional[Callable] = None,
    ):
        """
        Parameters:
            model (str, optional): one of the keys of wlrate.models.MODELS. Defaults to 'plackett_luce'.
            mu (float, optional): initial mean of new ratings. Defaults to 25.
            sigma (float, optional): initial standard deviation of new ratings. Defaults to 25 / 3.
            beta (float, optional): performance variability. Defaults to 25 / 6.
            kappa (float, optional): floor on the variance shrink multiplier. Defaults to 0.0001.
            tau (float, optional): skill drift added before every match. Defaults to 25 / 300.
            margin (float, optional): score gap beyond which wins count as impressive. Defaults to 0.
            epsilon (float, optional): Thurstone-Mosteller draw margin. Defaults to 0.1.
            window_size (int, optional): Part models compare against this many neighbours on each side.
                Defaults to 4.
            limit_sigma (bool, optional): clamp updated sigmas to their pre-match values. Defaults to False.
            balance (bool, optional): emphasize skill gaps inside a team. Defaults to False.
            gamma (callable, optional): custom gamma(c, num_teams, mu, sigma_squared, team, rank, weights).
                Defaults to the model's own gamma.
        """
        if model not in MODELS:
            raise InvalidArgument(f'unknown model {model!r}, expected one of {sorted(MODELS)}')
        self.model = model
        self.rule = MODELS[model]
        self.config = ModelConfig(
            mu=mu,
            sigma=sigma,
            beta=beta,
            kappa=kappa,
            tau=tau,
            margin=margin,
            epsilon=epsilon,
            window_size=window_size,
            limit_sigma=limit_sigma,
            balance=balance,
            gamma=gamma,
        )

    @property
    def gamma(self) -> Callable:
        if self.config.gamma is not None:
            return self.config.gamma
        return self.rule.default_gamma

    def create_rating(self, mu: float = None, sigma: float = None, name: str = None) -> Rating:
        """a new rating, missing values fall back to the model's initial mu and sigma"""
        return Rating(
            mu=self.config.mu if mu is None else mu,
            sigma=self.config.sigma if sigma is None else sigma,
            name=name,
        )

    def load_rating(self, rating, name: str = None) -> Rating:
        """rebuild a rating stored as [mu, sigma]"""
        validate_rating_payload(rating)
        return Rating(mu=rating[0], sigma=rating[1], name=name)

    def calculate_ratings(
        self,
        teams,
        ranks=None,
        scores=None,
        weights=None,
        tau: float = None,
        limit_sigma: bool = None,
    ) -> List[List[Rating]]:
        """
        Computes the ratings of every player after a match.

        Parameters:
            teams (list of list of Rating): at least 2 non-empty teams.
            ranks (list, optional): finishing position of each team, lower is better, equal is a tie.
            scores (list, optional): score of each team, higher is better. Exclusive with ranks.
            weights (list of list, optional): contribution of each player, normalized per team into [1, 2].
            tau (float, optional): overrides the model's tau for this match.
            limit_sigma (bool, optional): overrides the model's limit_sigma for this match.

        Returns:
            list of list of Rating: new ratings in the same shape and order as teams.
        """
        validate_match(teams, ranks=ranks, scores=scores, weights=weights)
        if tau is None:
            tau = self.config.tau
        elif not is_number(tau) or tau < 0.0 or not math.isfinite(tau):
            raise InvalidArgument(f'tau must be a non-negative number, got {tau!r}')
        if limit_sigma is None:
            limit_sigma = self.config.limit_sigma

        num_teams = len(teams)
        logger.debug(f'rating {num_teams} teams with {self.model}')

        tau_squared = tau**2.0
        decayed_teams = [
            [player.copy(sigma=math.sqrt(player.sigma**2.0 + tau_squared)) for player in team] for team in teams
        ]

        if scores is not None:
            scores = [float(score) for score in scores]
            ranks = self.calculate_rankings([-score for score in scores])
        elif ranks is not None:
            ranks = [float(rank) for rank in ranks]
        else:
            ranks = [float(idx) for idx in range(num_teams)]

        if weights is not None:
            weights = [normalize(team_weights, 1.0, 2.0) for team_weights in weights]

        # scores and weights travel with their teams through the sort
        placeholders = [None] * num_teams
        rows = matrix_transpose(
            [
                decayed_teams,
                ranks,
                scores if scores is not None else placeholders,
                weights if weights is not None else placeholders,
            ]
        )
        sorted_rows, restore_order = unwind(ranks, rows)
        sorted_teams, sorted_ranks, sorted_scores, sorted_weights = matrix_transpose(sorted_rows)

        team_ratings = self.calculate_team_ratings(sorted_teams, ranks=sorted_ranks)
        updates = self.rule.team_updates(
            team_ratings,
            self.config,
            self.gamma,
            scores=sorted_scores if scores is not None else None,
            weights=sorted_weights if weights is not None else None,
        )

        new_teams = []
        for team_rating, (omega, delta), team_weights in zip(team_ratings, updates, sorted_weights):
            new_teams.append(self.update_team(team_rating, omega, delta, team_weights))

        result, _ = unwind(restore_order, new_teams)

        if limit_sigma:
            logger.debug('limiting sigma to pre-match values')
            result = [
                [
                    player.copy(sigma=min(player.sigma, original.sigma))
                    for player, original in zip(new_team, original_team)
                ]
                for new_team, original_team in zip(result, teams)
            ]
        return result

    def update_team(self, team_rating: TeamRating, omega: float, delta: float, team_weights=None) -> List[Rating]:
        """
        Splits a team's omega and delta across its players in proportion to their share of the team
        variance. Higher weights amplify gains and dampen losses.
        """
        kappa = self.config.kappa
        players = []
        for j, player in enumerate(team_rating.team):
            weight = team_weights[j] if team_weights is not None else 1.0
            variance_ratio = (player.sigma**2.0) / team_rating.sigma_squared
            if omega >= 0.0:
                mu = player.mu + variance_ratio * omega * weight
                shrink = 1.0 - variance_ratio * delta * weight
            else:
                mu = player.mu + variance_ratio * omega / weight
                shrink = 1.0 - variance_ratio * delta / weight
            sigma = player.sigma * math.sqrt(max(shrink, kappa))
            players.append(player.copy(mu=mu, sigma=sigma))
        return players

    def calculate_team_ratings(self, teams, ranks=None) -> List[TeamRating]:
        """
        Aggregates each team into one TeamRating.

        With balance on, every player is weighted by 1 + (max_ordinal - ordinal) / (max_ordinal + kappa)
        so that teammates far below the team's best player count for more.
        """
        if ranks is None:
            ranks = self.calculate_rankings(list(range(len(teams))))
        team_ratings = []
        for team, rank in zip(teams, ranks):
            ordinals = [player.ordinal() for player in team]
            max_ordinal = max(ordinals)
            mu_sum = 0.0
            sigma_squared_sum = 0.0
            for player, ordinal in zip(team, ordinals):
                if self.config.balance:
                    balance_weight = 1.0 + (max_ordinal - ordinal) / (max_ordinal + self.config.kappa)
                else:
                    balance_weight = 1.0
                mu_sum += player.mu * balance_weight
                sigma_squared_sum += (player.sigma * balance_weight) ** 2.0
            team_ratings.append(TeamRating(mu=mu_sum, sigma_squared=sigma_squared_sum, team=team, rank=rank))
        return team_ratings

    @staticmethod
    def calculate_rankings(values) -> List[float]:
        """competition ranking, tied values share the first sorted position at which they appear"""
        rank_map = {}
        for position, value in enumerate(sorted(values)):
            rank_map.setdefault(value, position)
        return [float(rank_map[value]) for value in values]

    def _pairwise_win_probs(self, team_ratings) -> np.ndarray:
        """matrix of P(team i beats team j), zero on the diagonal"""
        mus = np.array([team.mu for team in team_ratings])
        sigma_squareds = np.array([team.sigma_squared for team in team_ratings])
        combined_devs = np.sqrt(self.config.two_beta_squared + sigma_squareds[:, None] + sigma_squareds[None, :])
        probs = norm.cdf((mus[:, None] - mus[None, :]) / combined_devs)
        np.fill_diagonal(probs, 0.0)
        return probs

    def _normalized_win_probs(self, team_ratings) -> np.ndarray:
        num_teams = len(team_ratings)
        win_probs = self._pairwise_win_probs(team_ratings).sum(axis=1) / (num_teams - 1)
        return win_probs / win_probs.sum()

    def predict_win_probability(self, teams) -> List[float]:
        """probability of each team winning, sums to 1"""
        validate_teams(teams)
        team_ratings = self.calculate_team_ratings(teams)
        if len(team_ratings) == 2:
            team_a, team_b = team_ratings
            prob = normal.cdf(
                (team_a.mu - team_b.mu)
                / math.sqrt(self.config.two_beta_squared + team_a.sigma_squared + team_b.sigma_squared)
            )
            return [prob, 1.0 - prob]
        return self._normalized_win_probs(team_ratings).tolist()

    def predict_draw_probability(self, teams) -> float:
        """probability that the match ends in a draw, averaged over every pair of teams"""
        validate_teams(teams)
        total_player_count = sum(len(team) for team in teams)
        draw_probability = 1.0 / total_player_count
        draw_margin = math.sqrt(total_player_count) * self.config.beta * normal.inv_cdf((1.0 + draw_probability) / 2.0)

        team_ratings = self.calculate_team_ratings(teams)
        pairwise_probs = []
        for team_a, team_b in itertools.combinations(team_ratings, 2):
            combined_dev = math.sqrt(self.config.two_beta_squared + team_a.sigma_squared + team_b.sigma_squared)
            pairwise_probs.append(
                normal.cdf((draw_margin - team_a.mu + team_b.mu) / combined_dev)
                - normal.cdf((team_b.mu - team_a.mu - draw_margin) / combined_dev)
            )
        return sum(pairwise_probs) / len(pairwise_probs)

    def predict_rank_probability(self, teams) -> List[tuple]:
        """
        Predicted finishing position of each team.

        Returns:
            list of (rank, probability) in the order of teams. Ranks start at 1, teams with equal
            probability share a rank, probabilities sum to 1.
        """
        validate_teams(teams)
        team_ratings = self.calculate_team_ratings(teams)
        probs = self._normalized_win_probs(team_ratings)

        order = np.argsort(-probs, kind='stable')
        ranks = [0] * len(team_ratings)
        current_rank = 1
        for position, team_idx in enumerate(order):
            if position > 0 and probs[team_idx] < probs[order[position - 1]]:
                current_rank = position + 1
            ranks[team_idx] = current_rank
        return [(rank, float(prob)) for rank, prob in zip(ranks, probs)]

    def __repr__(self):
        return f'RatingModel(model={self.model!r}, config={self.config})'

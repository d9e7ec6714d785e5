"""
Pairwise update rules from "A Bayesian Approximation Method for Online Ranking"
https://jmlr.csail.mit.edu/papers/volume12/weng11a/weng11a.pdf

Bradley-Terry (logistic) and Thurstone-Mosteller (gaussian) comparisons, each with full pairing
(every team against every other team) and partial pairing (only teams within a window of sorted
positions).
"""
import math
from wlrate.utils.math_utils import sigmoid_scalar, v, w, vt, wt

WIN = 1.0
DRAW = 0.5
LOSS = 0.0


def default_gamma(c, num_teams, mu, sigma_squared, team, rank, weights):
    """sqrt(sigma^2) / c, the default for every Weng-Lin model"""
    return math.sqrt(sigma_squared) / c


def margin_factor(score_i, score_q, margin):
    """log scaled bonus for an impressive win, 1.0 when margins are off or the gap is small"""
    if margin <= 0.0:
        return 1.0
    score_diff = math.fabs(score_i - score_q)
    if score_diff > margin:
        return math.log1p(score_diff / margin)
    return 1.0


def outcome_from_ranks(rank_i, rank_q):
    """outcome for team i, lower rank is better"""
    if rank_q > rank_i:
        return WIN
    if rank_q < rank_i:
        return LOSS
    return DRAW


def thurstone_mosteller_pair(delta_mu, sigma_squared, c_iq, outcome, config):
    """returns (omega contribution, v_val) from the truncated gaussian moments"""
    eps = config.epsilon / c_iq
    sigma_squared_to_c = sigma_squared / c_iq
    if outcome == WIN:
        return sigma_squared_to_c * v(delta_mu, eps), w(delta_mu, eps)
    if outcome == LOSS:
        return -sigma_squared_to_c * v(-delta_mu, eps), w(-delta_mu, eps)
    return sigma_squared_to_c * vt(delta_mu, eps), wt(delta_mu, eps)


def bradley_terry_pair(delta_mu, sigma_squared, c_iq, outcome, config):
    """returns (omega contribution, v_val) from the logistic win probability"""
    prob = sigmoid_scalar(delta_mu)
    return (sigma_squared / c_iq) * (outcome - prob), prob * (1.0 - prob)


class PairwiseRule:
    """
    Accumulates omega and delta for each team one opponent at a time.

    Attributes:
        name (str): registry name of the model.
        pair_func (callable): (delta_mu, sigma_squared, c_iq, outcome, config) -> (omega_step, v_val).
        windowed (bool): compare against teams within config.window_size sorted positions
            instead of the whole field.
    """

    def __init__(self, name: str, pair_func, windowed: bool = False):
        self.name = name
        self.pair_func = pair_func
        self.windowed = windowed
        self.default_gamma = default_gamma

    def opponents(self, i: int, num_teams: int, window_size: int):
        """indices of the teams that team i is compared against"""
        if self.windowed:
            start = max(0, i - window_size)
            end = min(num_teams, i + window_size + 1)
        else:
            start, end = 0, num_teams
        return [q for q in range(start, end) if q != i]

    def team_updates(self, team_ratings, config, gamma, scores=None, weights=None):
        """
        Computes the (omega, delta) pair of every team.

        Parameters:
            team_ratings (list of TeamRating): teams sorted by rank.
            config (ModelConfig): model parameters.
            gamma (callable): gamma function resolved by the model.
            scores (list, optional): scores aligned with team_ratings, used for margin factors.
            weights (list, optional): normalized player weights aligned with team_ratings.

        Returns:
            list of (omega, delta) tuples aligned with team_ratings.
        """
        num_teams = len(team_ratings)
        updates = []
        for i, team_i in enumerate(team_ratings):
            omega = 0.0
            delta = 0.0
            team_weights = weights[i] if weights is not None else None
            for q in self.opponents(i, num_teams, config.window_size):
                team_q = team_ratings[q]
                c_iq = math.sqrt(team_i.sigma_squared + team_q.sigma_squared + config.two_beta_squared)
                factor = 1.0
                if scores is not None:
                    factor = margin_factor(scores[i], scores[q], config.margin)
                delta_mu = ((team_i.mu - team_q.mu) / c_iq) * factor
                outcome = outcome_from_ranks(team_i.rank, team_q.rank)

                omega_step, v_val = self.pair_func(delta_mu, team_i.sigma_squared, c_iq, outcome, config)
                omega += omega_step

                gamma_value = gamma(
                    c_iq, num_teams, team_i.mu, team_i.sigma_squared, team_i.team, team_i.rank, team_weights
                )
                delta += (gamma_value * team_i.sigma_squared / (c_iq**2.0)) * v_val
            updates.append((omega, delta))
        return updates

    def __repr__(self):
        return f'PairwiseRule({self.name!r})'


bradley_terry_full = PairwiseRule('bradley_terry_full', bradley_terry_pair)
bradley_terry_part = PairwiseRule('bradley_terry_part', bradley_terry_pair, windowed=True)
thurstone_mosteller_full = PairwiseRule('thurstone_mosteller_full', thurstone_mosteller_pair)
thurstone_mosteller_part = PairwiseRule('thurstone_mosteller_part', thurstone_mosteller_pair, windowed=True)

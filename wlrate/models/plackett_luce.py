"""
Generalized Plackett-Luce update rule, Algorithm 4 of Weng and Lin
https://jmlr.csail.mit.edu/papers/volume12/weng11a/weng11a.pdf

Every team is scored against the whole field at once: a team's chance of finishing ahead of all the
teams ranked equal or worse is its share of their exponentiated strengths, and omega/delta are the
gradient and curvature of that log-likelihood. No pairwise enumeration is needed.
"""
import math
from scipy.special import logsumexp
from wlrate.models.weng_lin import default_gamma, margin_factor


def effective_mus(team_ratings, scores, margin):
    """
    Team means stretched by the score margins.

    Each pair of teams moves apart by half of (margin_factor - 1) times their gap, averaged over the
    other teams, so a two team match sees its gap scaled by exactly the margin factor.
    """
    mus = [team.mu for team in team_ratings]
    if scores is None or margin <= 0.0:
        return mus
    num_teams = len(team_ratings)
    adjusted = []
    for i, mu_i in enumerate(mus):
        shift = 0.0
        for q, mu_q in enumerate(mus):
            if q == i:
                continue
            factor = margin_factor(scores[i], scores[q], margin)
            shift += (mu_i - mu_q) * (factor - 1.0)
        adjusted.append(mu_i + shift / (2.0 * (num_teams - 1)))
    return adjusted


class PlackettLuceRule:
    """field level update, the default and recommended model"""

    name = 'plackett_luce'

    def __init__(self):
        self.default_gamma = default_gamma

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
        c = math.sqrt(sum(team.sigma_squared + config.beta_squared for team in team_ratings))

        mus = effective_mus(team_ratings, scores, config.margin)
        # strengths stay in log space, exp(mu / c) over- or underflows for lopsided fields
        log_strengths = [mu / c for mu in mus]

        ranks = [team.rank for team in team_ratings]
        log_sum_q = [
            logsumexp([log_strengths[t] for t in range(num_teams) if ranks[t] >= rank_q]) for rank_q in ranks
        ]
        tie_counts = [ranks.count(rank_q) for rank_q in ranks]

        updates = []
        for i, team_i in enumerate(team_ratings):
            omega = 0.0
            delta = 0.0
            for q in range(num_teams):
                if ranks[q] > ranks[i]:
                    continue
                share = math.exp(log_strengths[i] - log_sum_q[q])
                delta += share * (1.0 - share) / tie_counts[q]
                if q == i:
                    omega += (1.0 - share) / tie_counts[q]
                else:
                    omega -= share / tie_counts[q]

            omega *= team_i.sigma_squared / c
            delta *= team_i.sigma_squared / (c**2.0)
            team_weights = weights[i] if weights is not None else None
            delta *= gamma(c, num_teams, team_i.mu, team_i.sigma_squared, team_i.team, team_i.rank, team_weights)
            updates.append((omega, delta))
        return updates

    def __repr__(self):
        return 'PlackettLuceRule()'


plackett_luce = PlackettLuceRule()

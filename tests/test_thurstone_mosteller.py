"""
Thurstone-Mosteller full and partial pairing
the expected values below come from working the truncated gaussian formulas by hand with tau = 0
"""
import pytest
from wlrate import RatingModel


@pytest.mark.parametrize('model_name', ['thurstone_mosteller_full', 'thurstone_mosteller_part'])
def test_thurstone_mosteller_1v1(model_name):
    model = RatingModel(model=model_name, tau=0.0)
    [[winner], [loser]] = model.calculate_ratings([[model.create_rating()], [model.create_rating()]])
    assert winner.mu == pytest.approx(29.2307, abs=5e-3)
    assert loser.mu == pytest.approx(20.7693, abs=5e-3)
    assert winner.sigma == pytest.approx(7.6309, abs=5e-3)
    assert loser.sigma == pytest.approx(winner.sigma)


def test_thurstone_mosteller_defaults():
    model = RatingModel(model='thurstone_mosteller_full')
    assert model.config.epsilon == 0.1
    assert model.config.kappa == 0.0001
    assert model.config.tau == pytest.approx(25.0 / 300.0)


def test_larger_epsilon_moves_winner_further():
    small = RatingModel(model='thurstone_mosteller_full', epsilon=0.1)
    large = RatingModel(model='thurstone_mosteller_full', epsilon=2.0)
    [[small_winner], _] = small.calculate_ratings([[small.create_rating()], [small.create_rating()]])
    [[large_winner], _] = large.calculate_ratings([[large.create_rating()], [large.create_rating()]])
    assert large_winner.mu > small_winner.mu


def test_draw_pulls_means_together():
    model = RatingModel(model='thurstone_mosteller_full')
    strong = model.create_rating(mu=30.0)
    weak = model.create_rating(mu=20.0)
    [[new_strong], [new_weak]] = model.calculate_ratings([[strong], [weak]], ranks=[0, 0])
    assert new_strong.mu < strong.mu
    assert new_weak.mu > weak.mu
    assert new_strong.mu == pytest.approx(strong.mu - (new_weak.mu - weak.mu))


def test_hopeless_upset_stays_finite():
    model = RatingModel(model='thurstone_mosteller_part')
    favourite = model.create_rating(mu=500.0, sigma=1.0)
    underdog = model.create_rating(mu=-500.0, sigma=1.0)
    [[new_favourite], [new_underdog]] = model.calculate_ratings([[favourite], [underdog]], ranks=[2, 1])
    assert new_underdog.mu > underdog.mu
    assert new_favourite.mu < favourite.mu
    assert new_favourite.sigma > 0.0

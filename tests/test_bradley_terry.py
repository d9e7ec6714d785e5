"""
Bradley-Terry full and partial pairing
a 1v1 without skill drift matches the Plackett-Luce README example exactly
"""
import pytest
from wlrate import RatingModel


@pytest.mark.parametrize('model_name', ['bradley_terry_full', 'bradley_terry_part'])
def test_bradley_terry_1v1(model_name):
    model = RatingModel(model=model_name, tau=0.0)
    [[winner], [loser]] = model.calculate_ratings([[model.create_rating()], [model.create_rating()]])
    assert winner.mu == pytest.approx(27.63523138347365)
    assert loser.mu == pytest.approx(22.36476861652635)
    assert winner.sigma == pytest.approx(8.065506316323548)
    assert loser.sigma == pytest.approx(8.065506316323548)


def test_bradley_terry_part_defaults():
    model = RatingModel(model='bradley_terry_part')
    assert model.config.window_size == 4
    assert model.config.margin == 0.0
    assert model.config.limit_sigma is False
    assert model.config.balance is False


def test_bradley_terry_draw_between_equals_keeps_means():
    model = RatingModel(model='bradley_terry_full')
    a = model.create_rating()
    b = model.create_rating()
    [[new_a], [new_b]] = model.calculate_ratings([[a], [b]], ranks=[1, 1])
    assert new_a.mu == pytest.approx(25.0)
    assert new_b.mu == pytest.approx(25.0)
    assert new_a.sigma < a.sigma

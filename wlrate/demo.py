"""
rate one 2v2 match with every model and show some predictions

usage: python -m wlrate.demo
"""
import sys
import logging
from wlrate import MODELS, RatingModel

logger = logging.getLogger('wlrate')


def setup_logging(level=logging.INFO):
    stream_handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    logger.setLevel(level)


def print_teams(teams):
    max_len = min(max([len(player.name) for team in teams for player in team] + [10]), 25)
    print(f'{"player": <{max_len}}\t{"mu": >8}\t{"sigma": >8}\t{"mu - (3 * sd)"}')
    for team in teams:
        for player in team:
            print(f'{player.name: <{max_len}}\t{player.mu: >8.4f}\t{player.sigma: >8.4f}\t{player.ordinal():.4f}')


def main():
    setup_logging()
    for name in MODELS:
        model = RatingModel(model=name)
        teams = [
            [model.create_rating(name='Alice'), model.create_rating(name='Bob')],
            [model.create_rating(name='Charlie'), model.create_rating(name='Diana')],
        ]
        logger.info(f'{name}: team 1 beats team 2')
        print_teams(model.calculate_ratings(teams, ranks=[1, 2]))
        print()

    model = RatingModel()
    strong = [model.create_rating(mu=35.0, sigma=2.0, name='Pro')]
    weak = [model.create_rating(mu=15.0, sigma=2.0, name='Novice')]
    pro_prob, novice_prob = model.predict_win_probability([strong, weak])
    print(f'win probability: Pro {pro_prob:.1%}, Novice {novice_prob:.1%}')
    print(f'draw probability: {model.predict_draw_probability([strong, weak]):.1%}')


if __name__ == '__main__':
    main()

"""errors raised by the rating engine"""


class InvalidArgument(ValueError):
    """raised for malformed teams, ranks, scores, weights, ratings or model options"""

"""Conditional value selection."""


def pick(condition, yes, no):
    """Return ``yes`` when ``condition`` is true, otherwise ``no``."""
    return yes if condition else no
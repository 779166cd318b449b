import logging

import pytest

from stripe_checkout.logging import resolve_level


@pytest.mark.parametrize("name, level", [
    ("DEBUG", logging.DEBUG),
    ("INFO", logging.INFO),
    ("WARNING", logging.WARNING),
    ("ERROR", logging.ERROR),
])
def test_known_levels(name, level):
    assert resolve_level(name) == level


@pytest.mark.parametrize("name", ["VERBOSE", "", "BASIC_FORMAT"])
def test_unknown_levels_fall_back_to_info(name):
    assert resolve_level(name) == logging.INFO

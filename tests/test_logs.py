import logging

import pytest

from fuzzier_mcp.core.logs import _resolve_level, get_logger


@pytest.mark.parametrize(
    "name,expected",
    [
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        ("verbose", logging.INFO),
        ("", logging.INFO),
    ],
)
def test_resolve_level(name, expected):
    assert _resolve_level(name) == expected


def test_get_logger_is_namespaced():
    assert get_logger("tests").name == "fuzzier_mcp.tests"

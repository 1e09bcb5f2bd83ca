"""
pytest configuration and shared fixtures.
"""

import pytest

from calculator import ExpressionEvaluator, Token, TokenType
from config.config import OUTPUT_CONFIG


@pytest.fixture
def num():
    """Shorthand for building NUMBER tokens."""
    return Token.number


@pytest.fixture
def op():
    """Shorthand for building operator/paren tokens by TokenType name."""
    return lambda name: Token.of(TokenType[name])


@pytest.fixture
def evaluator():
    """Fresh evaluator with a small cache."""
    return ExpressionEvaluator(cache_size=4)


@pytest.fixture
def plain_output(monkeypatch):
    """Disable ANSI colors for the duration of a test."""
    monkeypatch.setitem(OUTPUT_CONFIG, 'use_color', False)


@pytest.fixture
def color_output(monkeypatch):
    """Force ANSI colors regardless of the environment."""
    monkeypatch.setitem(OUTPUT_CONFIG, 'use_color', True)
    monkeypatch.delenv('NO_COLOR', raising=False)
    monkeypatch.setenv('TERM', 'xterm')

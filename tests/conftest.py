"""Shared test fixtures for tradeview."""

import pytest

from tradeview.config import ViewSettings
from tradeview.models import Token, TokenPair

DAPP = Token(address="0xA", symbol="DAPP", decimals=18)
METH = Token(address="0xB", symbol="mETH", decimals=18)


@pytest.fixture
def view_settings() -> ViewSettings:
    """ViewSettings pinned to UTC with default colors and strict pair filtering."""
    return ViewSettings(timezone="UTC", pair_filter="strict")


@pytest.fixture
def pair() -> TokenPair:
    """DAPP/mETH pair, both 18 decimals."""
    return TokenPair(token0=DAPP, token1=METH)


@pytest.fixture
def usdc_eth_pair() -> TokenPair:
    """USDC (6 decimals) as token0, ETH (18 decimals) as token1."""
    return TokenPair(
        token0=Token(address="0xA", symbol="USDC", decimals=6),
        token1=Token(address="0xB", symbol="ETH", decimals=18),
    )

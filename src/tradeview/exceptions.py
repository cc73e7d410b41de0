"""Custom exceptions for tradeview.

The derivation pipeline itself never raises: missing pairs and empty logs
degrade to sentinel values. These errors are only raised at the boundary,
where raw records from the order logs are parsed into typed models.
"""


class TradeViewError(Exception):
    """Base exception for all tradeview errors."""


class OrderRecordError(TradeViewError):
    """Raised when a raw order record is missing a field or has a malformed value."""


class TokenRecordError(TradeViewError):
    """Raised when raw token metadata is missing an address or has bad decimals."""

# SPDX-License-Identifier: MIT


class QuoteplanError(Exception):
    """Base class for errors raised outside the pure layout core."""


class ConfigurationError(QuoteplanError):
    """Raised when the configuration file holds unusable layout constants."""


class SegmentConversionError(QuoteplanError):
    """Raised when a raw record cannot be converted into a segment."""


class SegmentSourceError(QuoteplanError):
    """Raised when a segment document cannot be read or parsed."""

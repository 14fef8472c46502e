from .base import QuoteSource
from .synthetic import SyntheticQuoteSource
from .zodia import ZodiaQuoteSource

__all__ = ['QuoteSource', 'SyntheticQuoteSource', 'ZodiaQuoteSource']

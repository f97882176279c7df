"""
Price Lookup API - LLM-backed product price comparison.
"""

__version__ = "1.0.0"

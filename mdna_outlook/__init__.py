"""Extract the management outlook excerpt from SEC 10-Q/10-K filings."""

__version__ = "1.0.0"

"""AI-assisted compact diagram generation and normalization for FossFLOW."""

__version__ = "0.1.0"

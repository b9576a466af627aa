"""ELVIS — bounded working memory for delegated agent sessions."""

__version__ = "0.2.0"

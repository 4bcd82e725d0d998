"""Doc-Links: markdown link validator for documentation content trees."""

__version__ = "0.1.0"

"""noticegen — open source notices from an installed npm dependency tree."""

__version__ = "0.1.0"

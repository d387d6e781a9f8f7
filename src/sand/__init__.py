"""sand: a plain-text activity time tracker."""

__version__ = "1.0.0"

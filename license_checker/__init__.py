"""License compliance checker for JavaScript dependency trees."""

__version__ = "0.1.0"

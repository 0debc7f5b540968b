"""Banking backend: PIN-based authentication, accounts and deposits."""

__version__ = "1.0.0"

"""Install Geth onto a CI runner and report the installed version."""

__version__ = "0.1.0"

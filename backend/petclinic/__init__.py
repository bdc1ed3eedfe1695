"""Pet clinic record-keeping web application."""

__version__ = "0.1.0"

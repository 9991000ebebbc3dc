"""Four-paddle, two-team Pong played on one keyboard."""

__version__ = "0.1.0"
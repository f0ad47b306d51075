"""Zone-control bot: world model, greedy decision engine and referee loop."""

__version__ = "0.1.0"

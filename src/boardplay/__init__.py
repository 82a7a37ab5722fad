"""Interactive chess board model: game tree, move reconciliation, board chrome."""

__version__ = "0.1.0"

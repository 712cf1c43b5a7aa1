"""blogstore - a durable keyed store for posts with a one-vote-per-caller like ledger."""

__version__ = "0.1.0"

"""Small application models: calculators, a clock formatter, a store client, a file explorer, a Hacker News reader, a dog picture store and UI state."""

__version__ = "0.1.0"
"""obslint - report unlinked mentions of wikilink targets in a vault."""

__version__ = "0.3.0"

"""Counter-Strike match statistics, FACEIT API access and map frame rendering."""

__version__ = "0.1.0"
"""weblinker — directed page graph with reachability queries."""

__version__ = "0.1.0"

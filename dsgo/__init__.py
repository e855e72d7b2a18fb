"""Classic data structures and algorithms: containers, heaps, hash sets, sorts, searches and graphs."""

__version__ = "0.1.0"
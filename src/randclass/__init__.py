"""randclass: print the fully-qualified name of a random class from a set of libraries."""

__version__ = "0.1.0"

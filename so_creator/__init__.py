"""so_creator: generate class declarations from class specs."""

__version__ = "0.1.0"

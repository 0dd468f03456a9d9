"""quicktodo - command-line TODO list manager with swappable storage backends."""

__version__ = "0.1.0"

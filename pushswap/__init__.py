"""Two-stack sorting with a restricted set of operations, and a solution checker."""

__version__ = "1.0.0"
__all__ = ["algorithm", "checker", "cli", "parsing", "stacks"]
"""Sort integers with two stacks and push, swap and rotate moves, plus small string, memory and I/O helpers."""

__version__ = "1.0.0"
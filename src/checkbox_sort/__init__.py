"""Keep checked checkbox items below unchecked ones in indented lists."""

__all__ = [
    "adapters",
    "buffer",
    "config",
    "engine",
    "grammar",
    "runtime",
]

__version__ = "0.1.0"

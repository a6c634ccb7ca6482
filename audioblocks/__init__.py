"""Building blocks for block-based audio processing: math and string helpers,
parameter tracking, fixed containers, delay lines and a ring-buffer FIFO."""

__version__ = "0.1.0"
__all__ = [
    "blockparameter",
    "containers",
    "delayline",
    "fifo",
    "mathtools",
    "stringtools",
]
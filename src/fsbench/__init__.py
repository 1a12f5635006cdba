"""fsbench -- latency harness for asynchronous filesystem operations."""

__version__ = "0.1.0"

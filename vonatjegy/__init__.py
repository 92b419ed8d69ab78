"""Train ticket office: trains, seat tickets, their registries, and small tracing and checking helpers."""

__version__ = "0.1.0"
__all__ = ["train", "ticket", "registry", "cli", "checks", "memtrace"]
"""Terminal status helpers, rust-analyzer project generation and worked exercise answers."""

__version__ = "5.0.0"
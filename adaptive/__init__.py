"""adaptive — cross-platform tool installation for developer machines."""

__version__ = "0.1.0"

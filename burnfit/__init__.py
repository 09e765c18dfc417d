"""burnfit - food energy to physical activity time equivalents."""

__version__ = "0.1.0"

"""Parameter tables for a simulation of bacterial infection and antimicrobial resistance."""

__version__ = "0.1.0"
__all__ = ["clinical", "regional", "parameters"]
"""Project scaffolding: language templates, Git and Beads setup, status and validation commands."""

__version__ = "2.0.0"

__all__ = ["__version__"]
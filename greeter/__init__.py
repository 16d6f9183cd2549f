"""Top level package for the :mod:`greeter` project.

The package exposes a :data:`__version__` attribute so packaging metadata and
callers can report the application version.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"

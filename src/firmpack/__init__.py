"""firmpack — firmware package assembly with the Builder pattern.

A director walks a builder through a fixed sequence of steps; build
profiles decide which components end up in the finished package.
"""

from firmpack.version import __version__

__all__: list[str] = ["__version__"]

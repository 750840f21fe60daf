"""Allow ``python -m firmpack`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m firmpack`` behaves identically to the ``firmpack`` console
script.
"""

from __future__ import annotations

from firmpack.cli.app import cli

if __name__ == "__main__":
    cli()

# topmark:header:start
#
#   project      : Versalog
#   file         : __main__.py
#   file_relpath : src/versalog/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Versalog via ``python -m versalog``.

It delegates directly to :func:`versalog.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how Versalog is launched.

Examples:
    Log a warning through the console preset::

        python -m versalog log warning "disk at {0}%" 93
"""

from __future__ import annotations

from versalog.cli.main import cli

if __name__ == "__main__":
    cli()

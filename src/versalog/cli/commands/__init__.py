# topmark:header:start
#
#   project      : Versalog
#   file         : __init__.py
#   file_relpath : src/versalog/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Versalog CLI subcommands."""

# topmark:header:start
#
#   project      : Versalog
#   file         : __init__.py
#   file_relpath : src/versalog/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration: internal diagnostics logging and TOML/environment settings.

Import submodules directly (``versalog.config.settings``); this package does not
re-export them so that `versalog.config.logging` stays importable from every
layer.
"""

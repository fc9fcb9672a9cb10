# topmark:header:start
#
#   project      : Versalog
#   file         : __init__.py
#   file_relpath : src/versalog/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core building blocks shared by the logger and the interaction layer."""

# topmark:header:start
#
#   project      : Versalog
#   file         : constants.py
#   file_relpath : src/versalog/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Versalog Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

VERSALOG_VERSION: str = get_version("versalog")

# Settings files, in lookup order.
VERSALOG_TOML_NAME: str = "versalog.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Environment overrides applied on top of file settings.
ENV_MIN_LEVEL: str = "VERSALOG_MIN_LEVEL"
ENV_MIN_FILE_LEVEL: str = "VERSALOG_MIN_FILE_LEVEL"
ENV_LOG_FILE: str = "VERSALOG_LOG_FILE"
ENV_TIMESTAMPS: str = "VERSALOG_TIMESTAMPS"

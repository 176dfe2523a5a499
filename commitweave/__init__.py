"""
CommitWeave - structured conventional commit authoring.

A CLI tool that renders conventional commit messages from structured input
and manages a layered JSON configuration: loading with defaults, schema
validation, diffed imports, secret-safe exports and lossless merges.
"""

__version__ = "1.0.0"

from commitweave.builder import CommitBuilder
from commitweave.config.schema import Config
from commitweave.config.store import ConfigStore

__all__ = ["CommitBuilder", "Config", "ConfigStore"]

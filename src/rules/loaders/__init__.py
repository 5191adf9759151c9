"""
Configuration loaders package.

This package contains implementations of the ConfigLoader interface
for loading repository configuration from different sources.
"""

from src.rules.loaders.github_loader import GitHubConfigLoader

__all__ = [
    "GitHubConfigLoader",
]

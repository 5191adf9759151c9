"""
Repository configuration.
"""

from dataclasses import dataclass


@dataclass
class RepoConfig:
    """Location of the per-repository policy file."""

    config_file: str = ".zappr.yaml"

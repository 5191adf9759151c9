"""
Integrations for external services and APIs.

This package contains the GitHub App client used to read repository
files and report commit statuses.
"""

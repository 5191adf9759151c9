"""
Application-wide constants.
"""

# Commit status context reported for every evaluated pull request
STATUS_CONTEXT = "zappr/pr/specification"

SUCCESS_DESCRIPTION = "PR has passed specification checks"

# Title and body length thresholds; a text passes only when strictly longer
DEFAULT_REQUIRED_LENGTH = 8

# Locations GitHub recognises for a pull request template, in lookup order
PULL_REQUEST_TEMPLATE_PATHS: tuple[str, ...] = (
    ".github/PULL_REQUEST_TEMPLATE.md",
    "PULL_REQUEST_TEMPLATE.md",
    "docs/PULL_REQUEST_TEMPLATE.md",
)

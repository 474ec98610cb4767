"""
Centralized constants for gitgraph.

Default strings used when a graph, branch or commit is created without
the corresponding option.
"""

DEFAULT_AUTHOR = "Sergio Flores <saxo-guy@epic.com>"
DEFAULT_BRANCH_NAME = "no-name"
DEFAULT_COMMIT_MESSAGE = "He doesn't like George Michael! Boooo!"

# Settings file location, relative to the user's home directory
SETTINGS_FILE = ".config/gitgraph/settings.json"

"""
playmark.config.defaults - Default configuration values.
"""

DEFAULT_CONFIG = {
    "files": {
        # Extensions picked up when a directory is given on the command line
        "extensions": [".md"],
        # Glob patterns (matched against file names) to skip
        "skip_files": [],
    },
    "output": {
        # "text" or "json"
        "format": "text",
        "indent": 2,
    },
}

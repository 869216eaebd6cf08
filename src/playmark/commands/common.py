"""
playmark.commands.common - Helpers shared by CLI commands.
"""

import argparse
import sys
from typing import Any, Dict, Optional

from playmark.config import ConfigError, get_config


def load_configuration(args: argparse.Namespace) -> Optional[Dict[str, Any]]:
    """Load configuration from --config or by discovery; None on failure."""
    try:
        return get_config(getattr(args, "config", None))
    except ConfigError as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return None

"""
Simple utils with no local dependencies, importable from anywhere without circular imports.
"""

import os
from pathlib import Path


def get_root(path_to_join: str = None) -> Path:
    if not path_to_join:
        return Path(__file__).parent
    return Path(os.path.join(Path(__file__).parent, path_to_join))

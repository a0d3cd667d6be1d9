"""Reading navigation data files.

The file format is the JSON shape the shell hands over::

    {
      "domain": "ADMIN",
      "structuralSubtypes": {
        "HEADER": {"states": {"FULL": [{"_id": "1", "menuItemText": "Home", ...}]}}
      }
    }
"""

import json
from pathlib import Path

from navlist.core.types import NavigationData


def load_navigation_data(path: Path) -> NavigationData:
    """Load navigation data from a JSON file.

    Args:
        path: Path to JSON file

    Returns:
        Parsed NavigationData

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not valid JSON or not valid navigation data
    """
    text = path.read_text(encoding="utf-8")
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e
    return NavigationData.from_dict(raw)

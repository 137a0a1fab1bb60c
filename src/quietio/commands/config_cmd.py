"""Show configuration (CLI command)."""

from __future__ import annotations

import json
from argparse import Namespace
from pathlib import Path

from quietio.config import find_project_root, global_config_path, load_config, project_config_path


def run(args: Namespace) -> None:
    """Print the merged configuration as JSON, preceded by the files it was read from."""
    project_root = find_project_root(Path.cwd())
    config = load_config(project_root)
    sources = [global_config_path()]
    if project_root is not None:
        sources.append(project_config_path(project_root))
    for source in sources:
        state = "" if source.is_file() else " (missing)"
        print(f"# Config: {source}{state}")
    print(json.dumps(config, indent=2))

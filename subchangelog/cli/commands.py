"""CLI Commands"""

import os

from subchangelog import COMMIT_TYPES
from subchangelog.config import load_config, get_config_path
from subchangelog.output import bold, dim, info


def display_config() -> int:
    """Display current configuration."""
    config = load_config()
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .subchangelogrc found)")

    env_output = os.environ.get('SUBCHANGELOG_OUTPUT_NAME')
    env_gitmodules = os.environ.get('SUBCHANGELOG_GITMODULES')
    if env_output or env_gitmodules:
        print(f"  {dim('Environment overrides:')}")
        if env_output:
            print(f"    SUBCHANGELOG_OUTPUT_NAME={env_output}")
        if env_gitmodules:
            print(f"    SUBCHANGELOG_GITMODULES={env_gitmodules}")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    output_name:        {info(config.output_name)}")
    print(f"    gitmodules:         {info(config.gitmodules)}")
    print(f"    include_submodules: {info(str(config.include_submodules).lower())}")

    headers = {**COMMIT_TYPES, **config.headers}
    print(f"\n  {bold('Sections:')}")
    for commit_type, header in headers.items():
        print(f"    {commit_type:<10}{info(header)}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  .subchangelogrc (in current directory)")
    print(f"    Global: ~/.subchangelogrc\n")

    return 0

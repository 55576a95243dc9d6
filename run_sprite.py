"""
run_sprite.py: CLI Entry Point

This script serves as the command-line interface entry point for the
folder sprite builder. It forwards execution to the CLI logic defined in
`src/folder_sprite/cli.py`.

Usage:
    python run_sprite.py path/to/icons [options]

This wrapper allows you to run the tool directly without needing to
modify PYTHONPATH or install the project as a package.

For help on available options, run:
    python run_sprite.py --help
"""
import sys
# Source code in src/ subdirectory
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import folder_sprite.cli as fs_cli

if __name__ == "__main__":
    fs_cli.main()

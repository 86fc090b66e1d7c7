#!/usr/bin/env python3
"""
draft-markdown - Rich-text content state to Markdown converter

Simple usage:
    python draft2md.py post.json            # Outputs post.md
    python draft2md.py /folder/path         # Converts all .json files in folder
    python draft2md.py post.json -o out.md  # Use specific output path
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from draft_markdown.cli import app

if __name__ == "__main__":
    app()

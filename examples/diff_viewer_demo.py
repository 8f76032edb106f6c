#!/usr/bin/env python3
"""
Diff Viewer Demo

Demonstrates how to render a GitHub pull request file with the diff
viewer in side-by-side and unified modes.

Usage:
    python examples/diff_viewer_demo.py [patch_file]

Example:
    git diff HEAD~1 -- setup.py > /tmp/setup.patch
    python examples/diff_viewer_demo.py /tmp/setup.patch
"""

import sys
import os
import logging
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from codereview_diff import DiffViewer, DisplayOptions, FileChange
from codereview_diff.config import AppConfig
from codereview_diff.viewer.file_list import group_files_by_directory, status_code, display_name


SAMPLE_PATCH = """@@ -1,5 +1,6 @@
 import os
-def main():
-    print("hello")
+def main(argv):
+    print("hello", argv)
+    return 0
 
 if __name__ == '__main__':"""


def setup_logging():
    """Set up logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def print_side_by_side(view):
    print(f"{'Old':>5} {'Removed':<40} {'New':>5} Added")
    for row in view.side_by_side_rows:
        left_number = row.left_number or ''
        right_number = row.right_number or ''
        left_text = row.left_text if row.left_text is not None else ''
        right_text = row.right_text if row.right_text is not None else ''
        print(f"{left_number:>5} {left_text:<40.40} {right_number:>5} {right_text}")


def print_unified(view):
    for row in view.unified_rows:
        print(f"{row.line_number_label:>5} {row.text}")


def main():
    """Main demo function."""
    setup_logging()
    logger = logging.getLogger(__name__)

    if len(sys.argv) > 2:
        print("Usage: python diff_viewer_demo.py [patch_file]")
        sys.exit(1)

    patch = SAMPLE_PATCH
    if len(sys.argv) == 2:
        patch_path = Path(sys.argv[1])
        if not patch_path.exists():
            print(f"Error: patch file not found: {patch_path}")
            sys.exit(1)
        patch = patch_path.read_text(encoding='utf-8')

    files = [
        FileChange.from_github({
            'filename': 'src/main.py',
            'status': 'modified',
            'additions': 3,
            'deletions': 2,
            'patch': patch,
        }),
        FileChange.from_github({'filename': 'docs/logo.png', 'status': 'added'}),
    ]

    print("\n📁 Changed files:")
    for group in group_files_by_directory(files):
        if group.label:
            print(f"  {group.label}")
        for file_change in group.files:
            marker = ' B' if file_change.is_binary else ''
            print(f"    {status_code(file_change.status)} {display_name(file_change, group.directory)}"
                  f" +{file_change.additions} -{file_change.deletions}{marker}")

    viewer = DiffViewer(AppConfig())
    logger.info("Rendering diff views...")

    view = viewer.render(files[0])
    print(f"\n📄 {view.filename} [{view.status_label}] +{view.stats.additions} -{view.stats.deletions}")
    print("\n--- Side by side ---")
    print_side_by_side(view)

    unified = viewer.render(files[0], options=DisplayOptions(show_hunk_headers=False), view_mode='unified')
    print("\n--- Unified (hunk headers hidden) ---")
    print_unified(unified)

    binary = viewer.render(files[1])
    print(f"\n📄 {binary.filename}: {binary.message}")


if __name__ == "__main__":
    main()

"""Application version.

MAJOR.MINOR comes from the VERSION file at the project root; the patch number
is the git commit count since the last tag when running from a checkout.
"""

import subprocess
from pathlib import Path

# editor/src/version.py -> project root
VERSION_FILE = Path(__file__).resolve().parent.parent.parent / "VERSION"


def read_major_minor(version_file=VERSION_FILE) -> str:
    try:
        return version_file.read_text().strip() or "0.0"
    except FileNotFoundError:
        return "0.0"


def _git_patch(cwd) -> str:
    """Commits since the last tag, or None outside a git checkout"""
    try:
        result = subprocess.run(
            ['git', 'describe', '--tags', '--long'],
            capture_output=True, text=True, check=False, cwd=str(cwd),
        )
    except (FileNotFoundError, NotADirectoryError):
        return None  # git not installed
    if result.returncode != 0:
        return None
    # Format: v0.1-5-gabcdef -> parts[1] = commit count
    parts = result.stdout.strip().rsplit('-', 2)
    if len(parts) == 3:
        return parts[1]
    return None


def get_version() -> str:
    """Version string such as '0.1.5' ('0.1.0' without git history)"""
    major_minor = read_major_minor()
    patch = _git_patch(VERSION_FILE.parent)
    return f"{major_minor}.{patch or 0}"

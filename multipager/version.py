from __future__ import annotations

import subprocess
from pathlib import Path
from typing import NamedTuple, Optional

from . import __version__


class BuildInfo(NamedTuple):
    commit: Optional[str]
    date: Optional[str]


def _run_git(args: list[str], cwd: Path) -> Optional[str]:
    try:
        out = subprocess.check_output(["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL)
        return out.decode().strip() or None
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        return None


def _from_git_repo() -> Optional[BuildInfo]:
    here = Path(__file__).resolve().parent
    root = _run_git(["rev-parse", "--show-toplevel"], cwd=here)
    if not root:
        return None
    commit = _run_git(["rev-parse", "HEAD"], cwd=Path(root))
    date = _run_git(["show", "-s", "--format=%cI", "HEAD"], cwd=Path(root))
    return BuildInfo(commit=commit, date=date)


def _from_embedded_file() -> Optional[BuildInfo]:
    # Generated at build time by the hatch build hook
    try:
        from . import _build_info  # type: ignore
    except ImportError:
        return None
    return BuildInfo(
        commit=getattr(_build_info, "COMMIT", None),
        date=getattr(_build_info, "DATE", None),
    )


def get_build_info() -> BuildInfo:
    # Priority: embedded file -> live git repo -> unknowns
    for getter in (_from_embedded_file, _from_git_repo):
        info = getter()
        if info and (info.commit or info.date):
            return info
    return BuildInfo(commit=None, date=None)


def get_version_string() -> str:
    info = get_build_info()
    if not info.commit:
        return f"multipager version {__version__}"
    return f"multipager version {__version__} ({info.commit[:7]} {info.date or 'unknown'})"

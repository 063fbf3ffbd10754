#!/usr/bin/env python3
"""
Run the repository checks locally using the ACTIVE virtual environment.

Order:
  1) uv sync --all-extras [--frozen if uv.lock exists]  (skipped with --no-sync)
  2) black --check on qiming/, scripts/ and tests/
  3) mypy on qiming/
  4) pytest tests/ with coverage of qiming
"""

import argparse
import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Dict, List, Optional


def repo_root() -> Path:
    here = Path(__file__).resolve().parent
    for d in [here] + list(here.parents):
        if (d / "pyproject.toml").exists():
            return d
    return here


REPO = repo_root()


def run(cmd: List[str], env: Optional[Dict[str, str]] = None) -> None:
    print(">>>", " ".join(cmd))
    subprocess.run(cmd, check=True, cwd=str(REPO), env=env)


def python_module(module: str) -> List[str]:
    return [sys.executable, "-m", module]


def sync_dependencies() -> None:
    uv_path = shutil.which("uv")
    if uv_path is None:
        print("uv not found; assuming dependencies are already installed")
        return
    sync_args = [uv_path, "sync", "--active", "--all-extras"]
    if (REPO / "uv.lock").exists():
        sync_args.append("--frozen")
    run(sync_args)


def main() -> None:
    parser = argparse.ArgumentParser(description="Run formatting, type and test checks.")
    parser.add_argument("--no-sync", action="store_true", help="Skip dependency sync.")
    parser.add_argument("--cov_fail_under", type=int, default=80, help="Minimum coverage percentage.")
    args = parser.parse_args()

    if not args.no_sync:
        sync_dependencies()

    run(python_module("black") + ["qiming", "scripts", "tests", "--check", "--line-length", "120"])
    run(python_module("mypy") + ["qiming", "--ignore-missing-imports"])

    env = os.environ.copy()
    env["PYTHONPATH"] = str(REPO)
    run(
        python_module("pytest")
        + [
            "tests/",
            "--cov=qiming",
            "--cov-report=term-missing",
            f"--cov-fail-under={args.cov_fail_under}",
        ],
        env=env,
    )

    print("\nALL CHECKS PASSED")


if __name__ == "__main__":
    try:
        main()
    except subprocess.CalledProcessError as e:
        print(f"\nCommand failed with exit code {e.returncode}", file=sys.stderr)
        sys.exit(e.returncode)

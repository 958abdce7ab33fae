"""Run metadata schema with JSON serialization."""

from __future__ import annotations

import json
import os
import platform
import subprocess
from dataclasses import asdict, dataclass
from importlib import metadata
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass
class ReproducibilityContext:
    seed: Optional[int]
    library_versions: Dict[str, str]
    system_info: Dict[str, Any]
    git_sha: Optional[str]


@dataclass
class RunMeta:
    run_id: str
    mode: str
    config: Dict[str, Any]
    inputs: Dict[str, Any]
    n_successful: Optional[int] = None
    n_skipped: Optional[int] = None
    cancelled: bool = False
    reproducibility: Optional[ReproducibilityContext] = None

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)

    def write_atomic(self, path: Path) -> None:
        """Write run_meta to a temporary file then move for atomicity."""
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        tmp_path.write_text(self.to_json())
        tmp_path.replace(path)

    @classmethod
    def from_json(cls, raw: str) -> "RunMeta":
        data = json.loads(raw)
        if data.get("reproducibility") is not None:
            data["reproducibility"] = ReproducibilityContext(**data["reproducibility"])
        return cls(**data)

    @classmethod
    def capture_context(
        cls,
        run_id: str,
        mode: str,
        config: Dict[str, Any],
        inputs: Dict[str, Any],
        seed: Optional[int],
        n_successful: Optional[int] = None,
        n_skipped: Optional[int] = None,
        cancelled: bool = False,
    ) -> "RunMeta":
        reproducibility = ReproducibilityContext(
            seed=seed,
            library_versions=_capture_lib_versions(),
            system_info={
                "os": platform.platform(),
                "cpu_count": os.cpu_count(),
                "python_version": platform.python_version(),
            },
            git_sha=_capture_git_sha(),
        )
        return cls(
            run_id=run_id,
            mode=mode,
            config=config,
            inputs=inputs,
            n_successful=n_successful,
            n_skipped=n_skipped,
            cancelled=cancelled,
            reproducibility=reproducibility,
        )


def _capture_lib_versions() -> Dict[str, str]:
    versions: Dict[str, str] = {}
    for lib in ["numpy", "pandas", "scipy", "typer", "rich", "pyyaml"]:
        try:
            versions[lib] = metadata.version(lib)
        except metadata.PackageNotFoundError:
            versions[lib] = "missing"
    return versions


def _capture_git_sha() -> Optional[str]:
    try:
        return subprocess.check_output(
            ["git", "rev-parse", "HEAD"], text=True, stderr=subprocess.DEVNULL
        ).strip()
    except (OSError, subprocess.CalledProcessError):
        return None

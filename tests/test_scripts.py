import os
import subprocess
import sys
from pathlib import Path

import pytest

pytest.importorskip("matplotlib")

REPO_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = REPO_ROOT / "src"


def _env_with_src() -> dict[str, str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_PATH)
    env["MPLBACKEND"] = "Agg"
    return env


def test_train_level_script(tmp_path) -> None:
    cmd = [
        sys.executable,
        "scripts/train_level.py",
        "--level",
        "2",
        "--steps",
        "3",
        "--points",
        "40",
        "--hidden",
        "3",
        "--log-every",
        "1",
        "--plot-dir",
        str(tmp_path),
    ]
    result = subprocess.run(cmd, cwd=REPO_ROOT, env=_env_with_src(), capture_output=True, text=True, check=True)
    assert "Level 2: The Circle Problem" in result.stdout
    assert "layers=[2, 3, 1]" in result.stdout
    assert "step=0001" in result.stdout
    assert (tmp_path / "level2_boundary.png").exists()
    assert (tmp_path / "level2_history.png").exists()


def test_train_level_rejects_oversized_hidden_layers() -> None:
    cmd = [sys.executable, "scripts/train_level.py", "--level", "1", "--steps", "1", "--hidden", "9"]
    result = subprocess.run(cmd, cwd=REPO_ROOT, env=_env_with_src(), capture_output=True, text=True)
    assert result.returncode != 0
    assert "Cannot use hidden layers" in result.stderr


def test_profile_step_script() -> None:
    cmd = [sys.executable, "scripts/profile_step.py", "--runs", "2", "--layers", "2,2,1", "--points", "20"]
    result = subprocess.run(cmd, cwd=REPO_ROOT, env=_env_with_src(), capture_output=True, text=True, check=True)
    assert "run=01" in result.stdout
    assert "connections=6" in result.stdout


def test_train_level_accepts_topology_within_budget() -> None:
    cmd = [sys.executable, "scripts/train_level.py", "--level", "1", "--steps", "1", "--hidden", "1,1,1,1"]
    result = subprocess.run(cmd, cwd=REPO_ROOT, env=_env_with_src(), capture_output=True, text=True, check=True)
    assert "layers=[2, 1, 1, 1, 1, 1]" in result.stdout

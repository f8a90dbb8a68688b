from __future__ import annotations

import os
import subprocess
import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]


def _env() -> dict:
    env = dict(os.environ)
    env["PYTHONPATH"] = str(REPO_ROOT)
    return env


class TestBenchToolContract(unittest.TestCase):
    def test_help_runs(self):
        cmd = [sys.executable, "-m", "yearview.tools.bench", "--help"]
        p = subprocess.run(cmd, cwd=str(REPO_ROOT), env=_env(), capture_output=True, text=True)
        self.assertEqual(p.returncode, 0, (p.stdout or "") + "\n" + (p.stderr or ""))

    def test_small_bench_runs_fast_path(self):
        cmd = [sys.executable, "-m", "yearview.tools.bench", "--n", "250", "--repeats", "1", "--warmup", "0", "--no-grid"]
        p = subprocess.run(cmd, cwd=str(REPO_ROOT), env=_env(), capture_output=True, text=True)
        combined = (p.stdout or "") + "\n" + (p.stderr or "")
        self.assertEqual(p.returncode, 0, combined)
        self.assertIn("[yearview-bench] base=", combined)
        self.assertIn("n=250", combined)

    def test_negative_n_is_rejected(self):
        from yearview.tools.bench import main

        self.assertEqual(main(["--n", "-1"]), 2)


if __name__ == "__main__":
    unittest.main(verbosity=2)

#!/usr/bin/env python
"""
Run the Streamlit salary form.

The page imports salary_tool by absolute name, so src/ is exported on
PYTHONPATH for the streamlit process. Port comes from SALARY_UI_PORT.

Usage:
    python scripts/run_app.py
"""
import os
import subprocess
import sys
from pathlib import Path

src_path = Path(__file__).resolve().parent.parent / 'src'
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from salary_tool.config.settings import get_settings


def main():
    settings = get_settings()
    if not settings.ui_script.exists():
        sys.exit(f"ERROR: Streamlit page missing at {settings.ui_script}")

    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in (str(settings.src_path), env.get("PYTHONPATH")) if p
    )

    cmd = [
        sys.executable, '-m', 'streamlit', 'run', str(settings.ui_script),
        '--server.port', str(settings.ui_port),
    ]
    print(f"Starting salary form on port {settings.ui_port}")
    try:
        subprocess.run(cmd, cwd=str(settings.project_root), env=env)
    except KeyboardInterrupt:
        print("\nApplication stopped.")


if __name__ == "__main__":
    main()

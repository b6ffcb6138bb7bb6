"""
Run the salary predictor API under uvicorn.

Host and port come from SALARY_API_HOST / SALARY_API_PORT (see Settings).

Usage:
    python scripts/run_api.py
"""
import os
import subprocess
import sys
from pathlib import Path

# Add src to path so settings can be read from a source checkout
src_path = Path(__file__).resolve().parent.parent / 'src'
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from salary_tool.config.settings import get_settings


def main():
    settings = get_settings()

    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in (str(settings.src_path), env.get("PYTHONPATH")) if p
    )

    cmd = [
        sys.executable, "-m", "uvicorn",
        "salary_tool.api.main:app",
        "--host", settings.api_host,
        "--port", str(settings.api_port),
        "--log-level", settings.log_level.lower(),
        "--reload",
    ]
    print(f"Starting Salary Predictor API on {settings.api_host}:{settings.api_port}")
    try:
        subprocess.run(cmd, cwd=str(settings.project_root), env=env)
    except KeyboardInterrupt:
        print("\nAPI stopped.")


if __name__ == "__main__":
    main()

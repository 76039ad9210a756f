#!/usr/bin/env python3
"""
Run the storefront and CashFlowMin side by side with auto-reload.

Ports come from STOREFRONT_PORT and CASHFLOW_PORT in config/.env, which is
created from config/.env.example on first run.
"""

import os
import sys
import shutil
import subprocess
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent
ENV_FILE = PROJECT_ROOT / "config" / ".env"

SERVICES = {
    "storefront.main:app": ("STOREFRONT_PORT", "8000"),
    "cashflow.main:app": ("CASHFLOW_PORT", "8001"),
}


def ensure_env_file() -> None:
    if not ENV_FILE.exists():
        shutil.copy(ENV_FILE.with_name(".env.example"), ENV_FILE)
        print(f"Created {ENV_FILE.relative_to(PROJECT_ROOT)}; set RECORDS_BASE_URL there")
    load_dotenv(ENV_FILE)


def main():
    ensure_env_file()

    processes = []
    for app, (port_var, default_port) in SERVICES.items():
        port = os.getenv(port_var, default_port)
        command = [sys.executable, "-m", "uvicorn", app, "--reload", "--port", port]
        processes.append(subprocess.Popen(command, cwd=PROJECT_ROOT))
        print(f"{app} -> http://localhost:{port}/docs")

    try:
        for process in processes:
            process.wait()
    except KeyboardInterrupt:
        for process in processes:
            process.terminate()
        for process in processes:
            process.wait()


if __name__ == "__main__":
    main()

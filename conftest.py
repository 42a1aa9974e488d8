"""
Root conftest.py for the order platform.

Puts each service directory on sys.path so its ``app`` package is importable
when tests are run from the repository root.
"""

import sys
from pathlib import Path


def pytest_configure(config):
    """
    Configure pytest to add service directories to sys.path.

    Each service ships its own ``app`` package, so only directories that
    contain one are added.
    """
    root_dir = Path(__file__).parent

    for service_path in sorted((root_dir / "services").iterdir()):
        if (service_path / "app").is_dir() and str(service_path) not in sys.path:
            sys.path.insert(0, str(service_path))

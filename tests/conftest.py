"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and that the
application settings are built for an isolated test environment.
"""

import os
import sys
from pathlib import Path

# Must be set before app.config is imported anywhere
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SESSION_BACKEND", "memory")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")
os.environ.setdefault("DB_INIT_ATTEMPTS", "1")

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

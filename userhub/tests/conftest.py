from __future__ import annotations

import os
import tempfile

# The engine and settings are built at import time, so the environment must be
# in place before any userhub module is imported by the test modules.
_TMP_DIR = tempfile.mkdtemp(prefix="userhub-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'userhub.db')}"
os.environ["JWT_SECRET"] = "test-signing-secret-0123456789abcdef"
os.environ["LOG_FILE"] = os.path.join(_TMP_DIR, "app.log")
os.environ["APP_ENV"] = "test"

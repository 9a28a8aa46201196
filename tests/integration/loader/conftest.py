from pathlib import Path

import pytest

SERVICE_CONFIG = """\
;; service configuration
/ name = "billing"
/ debug = false ;; never true in production

(database)
/ host = "db.internal"
/ port = 5432
/ pool_timeout = 2.5

(limits)
/ max_requests = 1000
/ burst = "yes"
"""


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Write a realistic niml file to a temp directory."""
    path = tmp_path / "service.niml"
    path.write_text(SERVICE_CONFIG, encoding="utf-8")
    return path


@pytest.fixture
def latin1_path(tmp_path: Path) -> Path:
    path = tmp_path / "latin1.niml"
    path.write_bytes('/ name = "caf\xe9"\n'.encode("latin-1"))
    return path

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from modelavail import config


@pytest.fixture(autouse=True)
def request_log(tmp_path, monkeypatch):
    """Keep the gateway request log out of the working directory."""
    log_file = tmp_path / "modelavail.log"
    monkeypatch.setattr(config, "LOG_FILE", log_file)
    return log_file

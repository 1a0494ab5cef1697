# PyAuC test fixtures
# Copyright 2025 sysmocom - s.f.m.c. GmbH <info@sysmocom.de>
# Copyright 2026 PyAuC contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
import os
from pathlib import Path

import pytest

top_dir = Path(Path(__file__) / "../..").resolve()
os.environ.setdefault("PYAUC_CONFIG", os.path.join(top_dir, "tests/config.yaml"))


def pytest_collection_modifyitems(session, config, items):
    def by_slow(item):
        return 0 if item.get_closest_marker("slow") is None else 1

    # Run slow tests at the end
    items.sort(key=by_slow, reverse=False)


@pytest.fixture
def api_client():
    from apiService import apiService
    apiService.config["TESTING"] = True
    with apiService.test_client() as client:
        yield client

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from core.config import Settings
from main import create_app

SAMPLE_REPORT = {
    "springBootVersion": "2.4.3",
    "timeline": {
        "startTime": "2021-03-01T10:00:00.000Z",
        "events": [
            {
                "startupStep": {
                    "name": "spring.boot.application.starting",
                    "id": 0,
                    "parentId": None,
                    "tags": [{"key": "mainApplicationClass", "value": "com.example.DemoApplication"}],
                },
                "startTime": "2021-03-01T10:00:00.000Z",
                "endTime": "2021-03-01T10:00:00.500Z",
                "duration": "PT0.5S",
            },
            {
                "startupStep": {
                    "name": "spring.context.refresh",
                    "id": 1,
                    "parentId": 0,
                    "tags": [],
                },
                "startTime": "2021-03-01T10:00:01.000Z",
                "endTime": "2021-03-01T10:00:07.000Z",
            },
        ],
    },
}


def write_report(path: Path, payload) -> Path:
    if isinstance(payload, (bytes, str)):
        data = payload.encode() if isinstance(payload, str) else payload
        path.write_bytes(data)
    else:
        path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def report_file(tmp_path: Path) -> Path:
    return write_report(tmp_path / "startup.json", SAMPLE_REPORT)


@pytest.fixture
def make_client():
    def _make(report_path: Path) -> TestClient:
        return TestClient(create_app(Settings(report_path=report_path)))

    return _make


@pytest.fixture
def client(report_file: Path, make_client) -> TestClient:
    return make_client(report_file)

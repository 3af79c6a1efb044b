"""Test setup for checklist_nav."""

from __future__ import annotations

import copy
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from checklist_nav.content import load_content, parse_content  # noqa: E402
from checklist_nav.schemas import ContentTree  # noqa: E402

SAMPLE_CONTENT = [
    {
        "id": "prep",
        "title": "1. Prepare Locally",
        "steps": [
            {
                "id": "install-python",
                "title": "1.1 Install Python",
                "description": "Create a virtual environment.",
                "blocks": [
                    {
                        "type": "command",
                        "platform": "General",
                        "commands": ["python3 -m venv venv", "source venv/bin/activate"],
                        "description": "Set up Nginx later.",
                    },
                    {
                        "type": "pitfall",
                        "title": "Forgetting to activate",
                        "content": "Packages end up installed globally.",
                        "fix": "Run source venv/bin/activate first.",
                    },
                ],
            },
            {
                "id": "install-deps",
                "title": "1.2 Install Dependencies",
                "description": "Install FastAPI and Uvicorn.",
                "blocks": [
                    {"type": "command", "platform": "General", "commands": ["pip install fastapi uvicorn"]},
                ],
            },
        ],
    },
    {
        "id": "proxy",
        "title": "2. Reverse Proxy",
        "description": "Put a web server in front of Uvicorn.",
        "steps": [
            {
                "id": "configure-nginx",
                "title": "2.1 Configure the proxy",
                "description": "Forward port 80 to the app.",
                "blocks": [
                    {"type": "command", "platform": "Ubuntu", "commands": ["sudo apt install nginx"]},
                    {"type": "text", "content": "Reload NGINX after every config change."},
                ],
            },
            {
                "id": "https",
                "title": "2.2 Enable HTTPS",
                "description": "Use Certbot for certificates.",
                "blocks": [],
            },
        ],
    },
    {
        "id": "security-polish",
        "title": "6. Security & Polish",
        "steps": [
            {
                "id": "backups",
                "title": "6.1 Backups",
                "description": "Snapshot the EBS volume.",
                "blocks": [
                    {
                        "type": "pitfall",
                        "title": "No restore test",
                        "content": "Untested backups fail when needed.",
                        "fix": "",
                    },
                ],
            },
            {
                "id": "monitoring",
                "title": "6.2 Monitoring",
                "description": "Watch CPU and memory in CloudWatch.",
                "blocks": [],
            },
        ],
    },
]


@pytest.fixture
def sample_content() -> list[dict]:
    """A fresh copy of the raw sample content."""
    return copy.deepcopy(SAMPLE_CONTENT)


@pytest.fixture
def sample_tree() -> ContentTree:
    """Small three-section tree covering every block type."""
    return parse_content(SAMPLE_CONTENT)


@pytest.fixture(scope="session")
def bundled_tree() -> ContentTree:
    """The deployment checklist shipped with the package."""
    return load_content()

"""Shared fixtures for HTTP adapter tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def cartridge_list_payload() -> dict[str, object]:
    return {
        "cartridges": [
            {
                "name": "php",
                "vendor": "redhat",
                "version": "5.4.0",
                "priority": 10,
                "manifest_url": "",
                "obsolete": False,
            },
            {"name": "php", "vendor": "redhat", "version": "5.3.0", "priority": 10},
            {
                "name": "community",
                "vendor": "acme",
                "version": "0.1",
                "priority": 1,
                "manifestURL": "https://example.com/community.yml",
                "unexpected": "ignored",
            },
            {"name": "jenkins", "vendor": "redhat", "version": "1.4", "priority": None},
        ]
    }

import json
import os
from configparser import ConfigParser
from typing import Any, Callable, Dict

import pytest

from vite_assets.models.vite_config import ViteConfig
from vite_assets.services.vite_status_service import ViteStatusService

TESTS_DIR = os.path.dirname(os.path.abspath(__file__))


@pytest.fixture
def config_path() -> str:
    return os.path.join(TESTS_DIR, "vite.test.conf")


@pytest.fixture
def config(config_path) -> ConfigParser:
    config = ConfigParser()
    config.read(config_path)
    yield config


@pytest.fixture
def resources_static_root() -> str:
    return os.path.join(TESTS_DIR, "resources", "static")


@pytest.fixture
def sample_manifest() -> Dict[str, Dict[str, Any]]:
    return {
        "main.js": {
            "file": "assets/main-a1b2.js",
            "src": "main.js",
            "isEntry": True,
            "css": ["assets/main-c3d4.css"],
            "imports": ["_vendor.js"],
            "dynamicImports": ["lazy.js"],
            "assets": ["assets/font-e5f6.woff2"],
        },
        "_vendor.js": {
            "file": "assets/vendor-0f9e.js",
            "css": ["assets/vendor-8d7c.css"],
        },
        "lazy.js": {
            "file": "assets/lazy-6b5a.js",
            "src": "lazy.js",
            "isDynamicEntry": True,
        },
    }


@pytest.fixture
def write_manifest(tmp_path) -> Callable[..., str]:
    def _write_manifest(
        manifest: Any, name: str = ".vite/manifest.json", base: str = ""
    ) -> str:
        manifest_path = os.path.join(str(tmp_path), base, name)
        os.makedirs(os.path.dirname(manifest_path), exist_ok=True)
        with open(manifest_path, "w", encoding="utf-8") as file:
            if isinstance(manifest, str):
                file.write(manifest)
            else:
                json.dump(manifest, file)
        return manifest_path

    return _write_manifest


@pytest.fixture
def vite_config(tmp_path) -> ViteConfig:
    return ViteConfig(static_root=str(tmp_path))


@pytest.fixture
def vite_status() -> ViteStatusService:
    return ViteStatusService(dev_server_enabled=False)


@pytest.fixture
def dev_server_status() -> ViteStatusService:
    return ViteStatusService(dev_server_enabled=True)

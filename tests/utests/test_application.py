import json
import runpy

import pytest

import vite_assets.dependency_injection.container
from vite_assets.application import create_fastapi_app, kwargs_from_config, run
from vite_assets.dependency_injection.config import get_config
from vite_assets.dependency_injection.container import Container
from vite_assets.services.template_service import TemplateService
from vite_assets.services.vite_manifest_service import ViteManifestService


def test_kwargs_from_config(config_path):
    get_config(config_path)

    assert kwargs_from_config() == {
        "host": "127.0.0.1",
        "port": 8006,
        "reload": False,
        "proxy_headers": True,
        "workers": 1,
        "factory": True,
        "reload_includes": ["*.conf", "*.json"],
    }


def test_create_fastapi_app(config, resources_static_root, tmp_path):
    version_file = tmp_path / "version.json"
    version_file.write_text(json.dumps({"version": "v1.0.0"}), encoding="utf-8")
    config["app"]["version_file_path"] = str(version_file)
    config["vite"]["static_root"] = resources_static_root
    container = Container()

    fastapi = create_fastapi_app(config=config, container=container)

    assert fastapi.version == "v1.0.0"
    assert vite_assets.dependency_injection.container.container() is container
    manifest_service = container.services.vite_manifest_service()
    assert isinstance(manifest_service, ViteManifestService)
    assert manifest_service is container.services.vite_manifest_service()
    assert manifest_service.get_asset_url("views/foo.js") == "assets/foo-BRBmoGS9.js"
    template_service = container.services.template_service()
    assert isinstance(template_service, TemplateService)
    assert template_service.vite_manifest_service is manifest_service


def test_create_fastapi_app_shares_status(config, tmp_path):
    config["vite"]["static_root"] = str(tmp_path)
    config["vite"]["dev_server_enabled"] = "true"
    container = Container()

    create_fastapi_app(config=config, container=container)

    assert container.services.vite_status_service().dev_server_enabled
    assert container.services.template_service().vite_asset("src/main.ts") == (
        "http://localhost:5173/src/main.ts"
    )


def test_invalid_loglevel(config):
    config["app"]["loglevel"] = "loud"

    with pytest.raises(ValueError, match="Invalid loglevel LOUD"):
        create_fastapi_app(config=config, container=Container())


def test_run(mocker, config_path):
    get_config(config_path)
    uvicorn_run = mocker.patch("uvicorn.run")

    run()

    uvicorn_run.assert_called_once_with(
        "vite_assets.application:create_fastapi_app", **kwargs_from_config()
    )


def test_run_as_module(mocker, config_path):
    get_config(config_path)
    uvicorn_run = mocker.patch("uvicorn.run")

    runpy.run_module("vite_assets", run_name="__main__")

    uvicorn_run.assert_called_once_with(
        "vite_assets.application:create_fastapi_app", **kwargs_from_config()
    )

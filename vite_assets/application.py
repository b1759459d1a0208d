# pylint: disable=c-extension-no-member
import logging
import os
from configparser import ConfigParser
from typing import Union

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

import vite_assets.dependency_injection.container
from vite_assets.dependency_injection.config import config_as_dict, get_config
from vite_assets.dependency_injection.container import Container
from vite_assets.misc.utils import get_version_from_file
from vite_assets.routers.misc_router import misc_router


def kwargs_from_config():
    config = get_config()

    kwargs = {
        "host": config.get("uvicorn", "host"),
        "port": config.getint("uvicorn", "port"),
        "reload": config.getboolean("uvicorn", "reload"),
        "proxy_headers": True,
        "workers": config.getint("uvicorn", "workers"),
        "factory": True,
    }

    reload_includes = config.get("uvicorn", "reload_includes", fallback=None)
    if reload_includes is not None and reload_includes != "":
        kwargs["reload_includes"] = reload_includes.split(" ")

    if config.getboolean("uvicorn", "use_ssl", fallback=False):
        kwargs["ssl_keyfile"] = (
            config.get("uvicorn", "base_dir") + "/" + config.get("uvicorn", "key_file")
        )
        kwargs["ssl_certfile"] = (
            config.get("uvicorn", "base_dir") + "/" + config.get("uvicorn", "cert_file")
        )
    return kwargs


def run():
    uvicorn.run("vite_assets.application:create_fastapi_app", **kwargs_from_config())


def create_fastapi_app(
    config: Union[ConfigParser, None] = None, container: Union[Container, None] = None
) -> FastAPI:
    container = container if container is not None else Container()
    _config: ConfigParser = config if config is not None else get_config()
    loglevel_name = _config.get("app", "loglevel", fallback="info").upper()
    loglevel = logging.getLevelName(loglevel_name)

    _version_file_path = _config.get("app", "version_file_path", fallback=None)
    version = get_version_from_file(_version_file_path)

    if isinstance(loglevel, str):
        raise ValueError(f"Invalid loglevel {loglevel_name}")
    logging.basicConfig(
        level=loglevel,
        datefmt="%m/%d/%Y %I:%M:%S %p",
    )

    container.config.from_dict(config_as_dict(_config))

    fastapi = FastAPI(
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        version=version,
    )
    fastapi.include_router(misc_router)

    vite_config = container.services.vite_config()
    if os.path.isdir(vite_config.static_root):
        fastapi.mount(
            vite_config.static_url,
            StaticFiles(directory=vite_config.static_root),
            name="static",
        )

    # the manifest is read once, at startup
    container.services.vite_manifest_service()

    container.wire(modules=["vite_assets.routers.misc_router"])
    fastapi.container = container  # type: ignore
    vite_assets.dependency_injection.container._container = (  # pylint: disable=protected-access
        container
    )
    return fastapi

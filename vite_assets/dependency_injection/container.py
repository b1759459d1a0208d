# pylint: disable=c-extension-no-member, too-few-public-methods
from typing import Union

from dependency_injector import containers, providers

from vite_assets.dependency_injection.services import Services


class Container(containers.DeclarativeContainer):
    config = providers.Configuration()

    services = providers.Container(Services, config=config)


_container: Union[Container, None] = None


def container() -> Container:
    if _container is None:
        raise RuntimeError("Application should first be instantiated")
    return _container

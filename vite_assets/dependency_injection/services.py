# pylint: disable=c-extension-no-member
from dependency_injector import containers, providers

from vite_assets.dependency_injection.config import get_vite_config
from vite_assets.services.template_service import TemplateService
from vite_assets.services.vite_manifest_service import ViteManifestService
from vite_assets.services.vite_status_service import ViteStatusService


class Services(containers.DeclarativeContainer):
    config = providers.Configuration()

    vite_config = providers.Singleton(get_vite_config, config.vite)

    vite_status_service = providers.Singleton(
        ViteStatusService,
        dev_server_enabled=vite_config.provided.dev_server_enabled,
    )

    vite_manifest_service = providers.Singleton(
        ViteManifestService,
        vite_config=vite_config,
        vite_status=vite_status_service,
    )

    template_service = providers.Singleton(
        TemplateService,
        vite_manifest_service=vite_manifest_service,
        jinja_template_directory=config.templates.jinja_path,
        static_url=vite_config.provided.static_url,
        dev_server_url=vite_config.provided.dev_server_url,
    )

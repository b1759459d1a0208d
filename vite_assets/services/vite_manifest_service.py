import logging
import os
from types import MappingProxyType
from typing import Dict, Iterator, KeysView, Mapping, Optional

from pydantic import TypeAdapter

from vite_assets.misc.utils import combine_uri, file_content_raise_if_none
from vite_assets.models.vite_chunk import MANIFEST_CONTEXT, ViteChunk
from vite_assets.models.vite_config import ViteConfig
from vite_assets.services.vite_status_service import ViteStatusService

log = logging.getLogger(__name__)

# Vite 5 writes ".vite/manifest.json", Vite 4 writes "manifest.json"
VITE_MANIFEST_DIR = ".vite"

_manifest_adapter = TypeAdapter(Dict[str, ViteChunk])


class ViteManifestService:
    """
    Read only view on the manifest.json file generated by Vite.

    The manifest is read once when the service is created. When the Vite dev
    server is enabled the manifest is never read and every lookup returns None.
    """

    def __init__(
        self,
        vite_config: ViteConfig,
        vite_status: ViteStatusService,
        static_root: Optional[str] = None,
    ):
        self._vite_status = vite_status
        self._manifest_path: Optional[str] = None

        if vite_status.dev_server_enabled:
            if vite_status.warn_about_manifest_once():
                log.info(
                    "The manifest file won't be read because the dev server is enabled. "
                    "The service will always return None chunks"
                )
            self._chunks: Mapping[str, ViteChunk] = MappingProxyType({})
            return

        base = vite_config.trimmed_base
        self._manifest_path = self._find_manifest(
            static_root if static_root is not None else vite_config.static_root,
            base,
            vite_config.manifest,
        )

        if self._manifest_path is None:
            if vite_status.warn_about_manifest_once():
                log.warning(
                    "The manifest file was not found. "
                    "Did you forget to build the assets? ('npm run build')"
                )
            self._chunks = MappingProxyType({})
            return

        chunks = self._load_manifest(self._manifest_path)
        if base:
            chunks = {
                combine_uri(base, key): chunk.with_base(base)
                for key, chunk in chunks.items()
            }
        self._chunks = MappingProxyType(chunks)

    @staticmethod
    def _find_manifest(
        static_root: str, base: str, manifest_name: str
    ) -> Optional[str]:
        manifest_path = os.path.join(static_root, base, manifest_name)

        if not os.path.isfile(manifest_path) and manifest_name.startswith(
            VITE_MANIFEST_DIR
        ):
            manifest_path = os.path.join(
                static_root, base, os.path.basename(manifest_name)
            )

        return manifest_path if os.path.isfile(manifest_path) else None

    @staticmethod
    def _load_manifest(manifest_path: str) -> Dict[str, ViteChunk]:
        chunks = _manifest_adapter.validate_json(
            file_content_raise_if_none(manifest_path), context=MANIFEST_CONTEXT
        )
        log.debug("Loaded %s chunks from manifest %s", len(chunks), manifest_path)
        return chunks

    @property
    def dev_server_enabled(self) -> bool:
        return self._vite_status.dev_server_enabled

    @property
    def manifest_path(self) -> Optional[str]:
        return self._manifest_path

    def get_manifest(self) -> Mapping[str, ViteChunk]:
        return self._chunks

    def get(self, key: str) -> Optional[ViteChunk]:
        """
        Gets the chunk for the given entry, or None when it doesn't exist.
        Always returns None when the dev server is enabled.
        """
        if self._vite_status.dev_server_enabled:
            log.warning(
                "Attempted to get a record from the manifest file while the Vite "
                "development server is activated. None was returned"
            )
            return None

        chunk = self._chunks.get(key)
        if chunk is None:
            log.warning("The chunk '%s' was not found", key)
        return chunk

    def __getitem__(self, key: str) -> Optional[ViteChunk]:
        return self.get(key)

    def get_asset_url(self, input_path: str) -> Optional[str]:
        chunk = self.get(input_path)
        return chunk.file if chunk is not None else None

    def keys(self) -> KeysView[str]:
        return self._chunks.keys()

    def contains_key(self, key: str) -> bool:
        return key in self._chunks

    def __contains__(self, key: object) -> bool:
        return key in self._chunks

    def __iter__(self) -> Iterator[ViteChunk]:
        return iter(self._chunks.values())

    def __len__(self) -> int:
        return len(self._chunks)

from typing import List, Optional, Set

from fastapi.templating import Jinja2Templates
from jinja2 import Environment, select_autoescape
from markupsafe import Markup

from vite_assets.misc.utils import combine_uri
from vite_assets.models.vite_chunk import ViteChunk
from vite_assets.services.vite_manifest_service import ViteManifestService

VITE_CLIENT = "@vite/client"


class TemplateService:
    def __init__(
        self,
        vite_manifest_service: ViteManifestService,
        jinja_template_directory: Optional[str] = None,
        static_url: str = "/static",
        dev_server_url: str = "http://localhost:5173",
    ):
        self.vite_manifest_service = vite_manifest_service
        self._static_url = static_url
        self._dev_server_url = dev_server_url

        if jinja_template_directory is not None and len(jinja_template_directory) > 0:
            self._templates = Jinja2Templates(directory=jinja_template_directory)
        else:
            self._templates = Jinja2Templates(
                env=Environment(autoescape=select_autoescape())
            )

        self._templates.env.globals["vite_asset"] = self.vite_asset
        self._templates.env.globals["vite_tags"] = self.vite_tags

    @property
    def templates(self) -> Jinja2Templates:
        return self._templates

    def _static(self, file: str) -> str:
        return combine_uri(self._static_url, file)

    def _dev(self, file: str) -> str:
        return combine_uri(self._dev_server_url, file)

    def imported_chunks(self, entry: str) -> List[ViteChunk]:
        """
        All chunks statically imported by entry, depth first, each chunk once.
        """
        root = self.vite_manifest_service.get(entry)
        if root is None:
            return []

        seen: Set[str] = {entry}
        chunks: List[ViteChunk] = []

        def visit(chunk: ViteChunk) -> None:
            for import_key in chunk.imports or ():
                if import_key in seen:
                    continue
                seen.add(import_key)
                imported = self.vite_manifest_service.get(import_key)
                if imported is not None:
                    chunks.append(imported)
                    visit(imported)

        visit(root)
        return chunks

    def css_files(self, entry: str) -> List[str]:
        root = self.vite_manifest_service.get(entry)
        if root is None:
            return []

        css_files: List[str] = []
        for chunk in [root, *self.imported_chunks(entry)]:
            for css in chunk.css or ():
                if css not in css_files:
                    css_files.append(css)
        return css_files

    def vite_asset(self, entry: str) -> str:
        if self.vite_manifest_service.dev_server_enabled:
            return self._dev(entry)

        chunk = self.vite_manifest_service.get(entry)
        return self._static(chunk.file) if chunk is not None else ""

    def vite_tags(self, entry: str) -> Markup:
        if self.vite_manifest_service.dev_server_enabled:
            return Markup(
                '<script type="module" src="{}"></script>\n'
                '<script type="module" src="{}"></script>'
            ).format(self._dev(VITE_CLIENT), self._dev(entry))

        chunk = self.vite_manifest_service.get(entry)
        if chunk is None:
            return Markup("")

        tags = [
            Markup('<link rel="stylesheet" href="{}">').format(self._static(css))
            for css in self.css_files(entry)
        ]
        if chunk.file.endswith(".css"):
            if chunk.file not in (chunk.css or ()):
                tags.append(
                    Markup('<link rel="stylesheet" href="{}">').format(
                        self._static(chunk.file)
                    )
                )
            return Markup("\n").join(tags)

        tags.extend(
            Markup('<link rel="modulepreload" href="{}">').format(
                self._static(imported.file)
            )
            for imported in self.imported_chunks(entry)
        )
        tags.append(
            Markup('<script type="module" src="{}"></script>').format(
                self._static(chunk.file)
            )
        )
        return Markup("\n").join(tags)

from typing import Any, Dict, Iterable, Optional, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)

from vite_assets.misc.utils import combine_uri

# validation context for records read from a manifest file, only the manifest
# field names are recognised there
MANIFEST_CONTEXT = {"manifest": True}


def _prefix_all(base: str, paths: Optional[Iterable[str]]) -> Optional[Tuple[str, ...]]:
    if paths is None:
        return None
    return tuple(combine_uri(base, value) for value in paths)


class ViteChunk(BaseModel):
    """
    A single record of the manifest.json file generated by Vite.
    See: https://vite.dev/guide/backend-integration
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    file: str
    src: Optional[str] = None
    is_entry: bool = Field(default=False, alias="isEntry", strict=True)
    is_dynamic_entry: bool = Field(default=False, alias="isDynamicEntry", strict=True)
    css: Optional[Tuple[str, ...]] = None
    assets: Optional[Tuple[str, ...]] = None
    imports: Optional[Tuple[str, ...]] = None
    dynamic_imports: Optional[Tuple[str, ...]] = Field(
        default=None, alias="dynamicImports"
    )

    @model_validator(mode="before")
    @classmethod
    def match_field_names_case_insensitive(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict):
            return data

        aliases: Dict[str, str] = {}
        for name, field in cls.model_fields.items():
            alias = field.alias or name
            aliases[alias.lower()] = alias

        from_manifest = bool(info.context and info.context.get("manifest"))
        matched: Dict[Any, Any] = {}
        for key, value in data.items():
            alias = aliases.get(key.lower()) if isinstance(key, str) else None
            if alias is not None:
                matched[alias] = value
            elif not from_manifest:
                matched[key] = value
        return matched

    @field_validator("src", mode="before")
    @classmethod
    def empty_src_is_absent(cls, value: Any) -> Any:
        if value == "":
            return None
        return value

    @field_validator("is_entry", "is_dynamic_entry", mode="before")
    @classmethod
    def null_flag_is_false(cls, value: Any) -> Any:
        return False if value is None else value

    def with_base(self, base: str) -> "ViteChunk":
        """
        Returns a copy of this chunk with every path prefixed with base.
        """
        return self.model_copy(
            update={
                "file": combine_uri(base, self.file),
                "src": combine_uri(base, self.src) if self.src else None,
                "css": _prefix_all(base, self.css),
                "assets": _prefix_all(base, self.assets),
                "imports": _prefix_all(base, self.imports),
                "dynamic_imports": _prefix_all(base, self.dynamic_imports),
            }
        )

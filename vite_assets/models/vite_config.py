from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class ViteConfig(BaseModel):
    manifest: str = Field(default=".vite/manifest.json")
    base: Optional[str] = None
    static_root: str = Field(default="static")
    static_url: str = Field(default="/static")
    dev_server_enabled: bool = Field(default=False)
    dev_server_url: str = Field(default="http://localhost:5173")

    @field_validator("base", mode="before")
    @classmethod
    def empty_base_is_absent(cls, value: Any) -> Any:
        if isinstance(value, str) and value.strip() == "":
            return None
        return value

    @property
    def trimmed_base(self) -> str:
        return self.base.lstrip("/") if self.base is not None else ""

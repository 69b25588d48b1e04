"""
End-to-end runner configuration.

Declared in pyproject.toml::

    [tool.destinations-e2e]
    base_url = "http://localhost:3001"
    spec_pattern = "tests/e2e/**/test_*.py"
    support_file = false

`support_file = false` means no shared setup is loaded for the specs
(pytest runs with --noconftest). A string names a plugin module that pytest
loads with -p instead.
"""
import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

TOOL_SECTION = "destinations-e2e"
BASE_URL_ENV = "E2E_BASE_URL"


class E2EConfig(BaseModel):
    """Where the end-to-end specs live and which server they target."""

    model_config = ConfigDict(extra="forbid")

    base_url: str = Field("http://localhost:3001", description="Server the specs call")
    spec_pattern: str = Field("tests/e2e/**/test_*.py", description="Glob, relative to the project root")
    support_file: str | bool = Field(False, description="Plugin module to load, or False for none")

    @field_validator("spec_pattern")
    @classmethod
    def _relative_glob(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("spec_pattern must not be empty")
        if Path(value).is_absolute():
            raise ValueError(f"spec_pattern must be relative to the project root, got {value!r}")
        return value


def load_e2e_config(root: str | Path = ".") -> E2EConfig:
    """Read [tool.destinations-e2e] from `root`/pyproject.toml.

    Missing file or section falls back to the defaults. E2E_BASE_URL, when
    set, overrides base_url.

    Raises:
        ValueError: on unknown keys, values of the wrong type, or an empty or
            absolute spec_pattern.
    """
    pyproject = Path(root) / "pyproject.toml"
    values: dict = {}
    if pyproject.exists():
        with open(pyproject, "rb") as f:
            values = dict(tomllib.load(f).get("tool", {}).get(TOOL_SECTION, {}))

    env_url = os.getenv(BASE_URL_ENV)
    if env_url:
        values["base_url"] = env_url

    # pydantic's ValidationError subclasses ValueError
    return E2EConfig(**values)

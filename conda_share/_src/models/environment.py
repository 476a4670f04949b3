from pathlib import Path
from typing import Any, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from conda_share._src.models.package import CondaPackage


class CondaEnvExportYaml(BaseModel):
    """Raw `conda env export` document"""
    name: str = Field(min_length=1)
    channels: List[str] = Field(default=[])
    # strings for conda packages, a `{pip: [...]}` mapping for pip packages
    dependencies: List[Any] = Field(default=[])

    @field_validator("channels", "dependencies", mode="before")
    @classmethod
    def _none_is_empty(cls, value):
        return [] if value is None else value


class EnvironmentExport(BaseModel):
    """A parsed env export, with only the conda dependencies kept"""
    name: str
    channels: List[str]
    specs: List[CondaPackage]

    @property
    def spec_names(self) -> set[str]:
        return {spec.name for spec in self.specs}


class SharableEnvironment(BaseModel):
    """The environment as it should be shared with others.

    Only holds the packages the user asked for plus anything installed with
    pip. Built once per request and never modified afterwards.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    channels: Tuple[str, ...] = ()
    conda_deps: Tuple[CondaPackage, ...] = ()
    pip_deps: Tuple[CondaPackage, ...] = ()

    def to_yaml(self) -> str:
        from conda_share._src.serializer import render
        return render(self)

    def save(self, path: str | Path) -> Path:
        from conda_share._src.serializer import write_env_file
        return write_env_file(self, path)

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from conda_share._src.constants import PYPI_CHANNEL


class CondaPackage(BaseModel):
    """A single package entry.

    Export documents only give `name[=version[=build]]` strings, while
    `conda list --json` gives every field separately (and calls the build
    `build_string`), so everything but the name is optional.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    version: Optional[str] = None
    build: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("build", "build_string"),
    )
    # channel the package came from, eg. 'conda-forge' or 'pypi'
    channel: Optional[str] = None

    @classmethod
    def from_spec_string(cls, spec: str):
        """Split a `name=version=build` string from an env export."""
        parts = spec.split("=")
        return cls(
            name=parts[0],
            version=parts[1] if len(parts) > 1 else None,
            build=parts[2] if len(parts) > 2 else None,
        )

    @property
    def is_pip(self) -> bool:
        return self.channel == PYPI_CHANNEL

    def __str__(self):
        return f"{self.name} - {self.version}"

"""
Pydantic base classes.

Parsed fossil output lives in strict, frozen models: a FileStatus or a
RepoInfo is a snapshot of what fossil printed and gets replaced, never
edited. Config sections use the lenient SectionModel so values read from
TOML or the environment can be coerced.
"""

from pydantic import BaseModel, ConfigDict


class FossilVCBaseModel(BaseModel):
    """Strict model: no coercion, no unknown fields, enums stored by value."""

    model_config = ConfigDict(
        strict=True,
        extra="forbid",
        use_enum_values=True,
        validate_assignment=True,
    )


class ImmutableModel(FossilVCBaseModel):
    """FossilVCBaseModel that is also frozen (and therefore hashable)."""

    model_config = ConfigDict(frozen=True)


class SectionModel(BaseModel):
    """One config file section; unknown keys are ignored."""

    model_config = ConfigDict(
        extra="ignore",
        validate_assignment=True,
    )

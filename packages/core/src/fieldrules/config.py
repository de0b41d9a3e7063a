"""VerifierConfig: engine options."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class VerifierConfig(BaseModel):
    """Options of a :class:`~fieldrules.verifier.ValidatorVerifier`.

    Attributes:
        by_accessor: Read non-public fields through ``get_<name>()``
            accessors (default) instead of reading the attribute directly.
        max_depth: Deepest allowed nesting of ``is_class`` rules;
            ``None`` disables the limit.
        detect_cycles: Fail when a nested entity is already being
            validated further up the current path.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    by_accessor: bool = True
    max_depth: int | None = Field(default=64, ge=1)
    detect_cycles: bool = True

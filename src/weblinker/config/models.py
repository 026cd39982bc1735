"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, weblinker.toml only
contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel

from weblinker.domain.types import TraversalStrategy


class TraversalConfig(BaseModel):
    """[traversal] section."""

    model_config = {"frozen": True}

    strategy: TraversalStrategy = TraversalStrategy.ITERATIVE


class InputConfig(BaseModel):
    """[input] section."""

    model_config = {"frozen": True}

    encoding: str = "utf-8"
    errors: str = "replace"

"""Tolerance settings shared by the comparison helpers."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class CanonicalConfig:
    abs_tol: float = 1e-9
    key_digits: int = 9


_CANONICAL_CONFIG = CanonicalConfig()


def get_canonical_config() -> CanonicalConfig:
    return copy.deepcopy(_CANONICAL_CONFIG)


def set_canonical_config(config: CanonicalConfig) -> None:
    global _CANONICAL_CONFIG
    _CANONICAL_CONFIG = copy.deepcopy(config)


__all__ = ["CanonicalConfig", "get_canonical_config", "set_canonical_config"]

from __future__ import annotations

import importlib
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, List, Mapping, Optional, Tuple

from uritemplate_conformance.spec.vectors import LEVELS, default_vector_files

ENV_VECTORS = "URITEMPLATE_CONFORMANCE_VECTORS"
ENV_EXPANDER = "URITEMPLATE_CONFORMANCE_EXPANDER"
ENV_EXTRACTOR = "URITEMPLATE_CONFORMANCE_EXTRACTOR"
ENV_EXPANSION_LEVEL = "URITEMPLATE_CONFORMANCE_EXPANSION_LEVEL"
ENV_EXTRACTION_LEVEL = "URITEMPLATE_CONFORMANCE_EXTRACTION_LEVEL"
ENV_WORKERS = "URITEMPLATE_CONFORMANCE_WORKERS"

DEFAULT_EXPANDER = "uritemplate:expand"
DEFAULT_EXPANSION_LEVEL = 4
DEFAULT_EXTRACTION_LEVEL = 3


class ConfigError(RuntimeError):
    pass


@dataclass(frozen=True)
class ConformanceConfig:
    vector_files: Tuple[Path, ...] = field(default_factory=lambda: tuple(default_vector_files()))
    expander: str = DEFAULT_EXPANDER
    extractor: Optional[str] = None
    expansion_level: int = DEFAULT_EXPANSION_LEVEL
    extraction_level: int = DEFAULT_EXTRACTION_LEVEL
    workers: int = 1

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ConformanceConfig":
        env = os.environ if environ is None else environ

        raw_vectors = (env.get(ENV_VECTORS) or "").strip()
        if raw_vectors:
            vector_files = tuple(Path(p) for p in raw_vectors.split(os.pathsep) if p.strip())
        else:
            vector_files = tuple(default_vector_files())
        if not vector_files:
            raise ConfigError(f"no vector files configured (set {ENV_VECTORS})")

        expander = (env.get(ENV_EXPANDER) or "").strip() or DEFAULT_EXPANDER
        extractor = (env.get(ENV_EXTRACTOR) or "").strip() or None

        return cls(
            vector_files=vector_files,
            expander=expander,
            extractor=extractor,
            expansion_level=_level_from_env(env, ENV_EXPANSION_LEVEL, DEFAULT_EXPANSION_LEVEL),
            extraction_level=_level_from_env(env, ENV_EXTRACTION_LEVEL, DEFAULT_EXTRACTION_LEVEL),
            workers=_int_from_env(env, ENV_WORKERS, 1, minimum=1),
        )

    def missing_vector_files(self) -> List[Path]:
        return [p for p in self.vector_files if not p.exists()]

    def require_vector_files(self) -> Tuple[Path, ...]:
        missing = self.missing_vector_files()
        if missing:
            names = ", ".join(str(p) for p in missing)
            raise ConfigError(f"vector file(s) not found: {names} (check {ENV_VECTORS})")
        return self.vector_files


def _int_from_env(env: Mapping[str, str], name: str, default: int, *, minimum: int) -> int:
    raw = (env.get(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer (got {raw!r})") from None
    if value < minimum:
        raise ConfigError(f"{name} must be >= {minimum} (got {value})")
    return value


def _level_from_env(env: Mapping[str, str], name: str, default: int) -> int:
    value = _int_from_env(env, name, default, minimum=1)
    if value not in LEVELS:
        raise ConfigError(f"{name} must be one of {list(LEVELS)} (got {value})")
    return value


def resolve_callable(dotted: str) -> Callable[..., Any]:
    """Import `module:attr` (or `module.attr`) and return the callable."""

    raw = str(dotted or "").strip()
    if ":" in raw:
        module_name, _, attr_path = raw.partition(":")
    else:
        module_name, _, attr_path = raw.rpartition(".")
    if not module_name or not attr_path:
        raise ConfigError(f"invalid callable path (expected module:attr): {dotted!r}")

    module = importlib.import_module(module_name)
    target: Any = module
    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError:
            raise ConfigError(f"{module_name!r} has no attribute {attr_path!r}") from None
    if not callable(target):
        raise ConfigError(f"{dotted!r} is not callable")
    return target

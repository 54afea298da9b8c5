from __future__ import annotations

import os
from pathlib import Path

import pytest

from uritemplate_conformance.config import (
    DEFAULT_EXPANDER,
    ENV_EXPANDER,
    ENV_EXPANSION_LEVEL,
    ENV_EXTRACTION_LEVEL,
    ENV_EXTRACTOR,
    ENV_VECTORS,
    ENV_WORKERS,
    ConfigError,
    ConformanceConfig,
    resolve_callable,
)


def test_from_env_defaults() -> None:
    config = ConformanceConfig.from_env({})

    assert config.expander == DEFAULT_EXPANDER
    assert config.extractor is None
    assert config.expansion_level == 4
    assert config.extraction_level == 3
    assert config.workers == 1
    assert [p.name for p in config.vector_files] == [
        "extended-tests.json",
        "spec-examples-by-section.json",
        "spec-examples.json",
    ]
    assert config.missing_vector_files() == []
    assert config.require_vector_files() == config.vector_files


def test_from_env_overrides(tmp_path: Path) -> None:
    a = tmp_path / "a.json"
    b = tmp_path / "b.yaml"
    env = {
        ENV_VECTORS: os.pathsep.join([str(a), str(b)]),
        ENV_EXPANDER: "my_lib:expand",
        ENV_EXTRACTOR: " my_lib:extract ",
        ENV_EXPANSION_LEVEL: "3",
        ENV_EXTRACTION_LEVEL: "2",
        ENV_WORKERS: "4",
    }

    config = ConformanceConfig.from_env(env)

    assert config.vector_files == (a, b)
    assert config.expander == "my_lib:expand"
    assert config.extractor == "my_lib:extract"
    assert config.expansion_level == 3
    assert config.extraction_level == 2
    assert config.workers == 4
    assert config.missing_vector_files() == [a, b]


def test_require_vector_files_names_the_env_var(tmp_path: Path) -> None:
    present = tmp_path / "present.json"
    present.write_text("{}", encoding="utf-8")
    missing = tmp_path / "missing.json"
    config = ConformanceConfig.from_env({ENV_VECTORS: os.pathsep.join([str(present), str(missing)])})

    with pytest.raises(ConfigError, match=f"missing.json.*{ENV_VECTORS}") as excinfo:
        config.require_vector_files()
    assert "present.json" not in str(excinfo.value)


def test_from_env_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENV_EXPANDER, "other:expand")
    monkeypatch.delenv(ENV_VECTORS, raising=False)
    assert ConformanceConfig.from_env().expander == "other:expand"


@pytest.mark.parametrize(
    ("name", "value"),
    [
        (ENV_EXPANSION_LEVEL, "five"),
        (ENV_EXPANSION_LEVEL, "5"),
        (ENV_EXTRACTION_LEVEL, "0"),
        (ENV_WORKERS, "0"),
    ],
)
def test_from_env_rejects_invalid_values(name: str, value: str) -> None:
    with pytest.raises(ConfigError, match=name):
        ConformanceConfig.from_env({name: value})


def test_resolve_callable() -> None:
    assert resolve_callable("os.path:join") is os.path.join
    assert resolve_callable("os.path.join") is os.path.join


@pytest.mark.parametrize("dotted", ["", "nomodule", "os:", "os.path:not_there", "os:sep"])
def test_resolve_callable_rejects_bad_paths(dotted: str) -> None:
    with pytest.raises(ConfigError):
        resolve_callable(dotted)


def test_resolve_callable_propagates_missing_module() -> None:
    with pytest.raises(ImportError):
        resolve_callable("definitely_not_a_real_module_xyz:expand")

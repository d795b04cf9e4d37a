"""Tests for declgen.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from declgen.config import DEFAULT_CONFIG_NAME, ConfigurationError, load_config
from declgen.models import DeclaratorConfig


def test_load_config_parses_expected_fields(project_builder) -> None:
    project_builder.write_config(
        {
            "compilerOptions": {"rootDir": "src", "outFile": "types/global.d.ts"},
            "include": ["src/**/*.ts"],
            "exclude": ["node_modules"],
        }
    )
    root = project_builder.path()

    config = load_config(cwd=root)

    assert isinstance(config, DeclaratorConfig)
    assert config.config_path == (root / DEFAULT_CONFIG_NAME).resolve()
    assert config.root_dir == (root / "src").resolve()
    assert config.out_file == (root / "types" / "global.d.ts").resolve()
    assert config.include == ["src/**/*.ts"]
    assert config.exclude == ["node_modules"]


def test_load_config_accepts_explicit_path(project_builder) -> None:
    path = project_builder.write_config(
        {"compilerOptions": {"rootDir": ".", "outFile": "out.d.ts"}}, name="custom.json"
    )

    config = load_config(path, cwd=project_builder.path())

    assert config.config_path == path.resolve()
    assert config.include == []


def test_load_config_reads_yaml_documents(project_builder) -> None:
    project_builder.write(
        {
            "declarations.yml": """
            compilerOptions:
              rootDir: lib
              outFile: dist/index.d.ts
            include:
              - "lib/*.ts"
            """
        }
    )

    config = load_config("declarations.yml", cwd=project_builder.path())

    assert config.root_dir == (project_builder.path() / "lib").resolve()
    assert config.include == ["lib/*.ts"]


def test_missing_document_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_config(cwd=tmp_path)


def test_missing_root_dir_names_field_and_path(project_builder) -> None:
    path = project_builder.write_config({"compilerOptions": {"outFile": "out.d.ts"}})

    with pytest.raises(ConfigurationError) as excinfo:
        load_config(cwd=project_builder.path())

    assert "rootDir" in str(excinfo.value)
    assert str(path.resolve()) in str(excinfo.value)


def test_missing_out_file_raises(project_builder) -> None:
    project_builder.write_config({"compilerOptions": {"rootDir": "src"}})

    with pytest.raises(ConfigurationError, match="outFile"):
        load_config(cwd=project_builder.path())


def test_missing_compiler_options_reports_root_dir(project_builder) -> None:
    project_builder.write_config({"include": ["*.ts"]})

    with pytest.raises(ConfigurationError, match="rootDir"):
        load_config(cwd=project_builder.path())


def test_invalid_json_raises(project_builder) -> None:
    project_builder.write({DEFAULT_CONFIG_NAME: "{ not json"})

    with pytest.raises(ConfigurationError, match="Failed to parse"):
        load_config(cwd=project_builder.path())


def test_non_mapping_document_raises(project_builder) -> None:
    project_builder.write({DEFAULT_CONFIG_NAME: "[1, 2]"})

    with pytest.raises(ConfigurationError, match="mapping"):
        load_config(cwd=project_builder.path())

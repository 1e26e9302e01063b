"""
Tests for the programmatic entry points.
"""

import pytest

from graphql_to_java import GeneratorConfig, generate, generate_to_dir
from graphql_to_java.api import apply_overrides
from graphql_to_java.errors import ConfigError

SCHEMA = "type User { id: ID! name: String } enum Status { ACTIVE }"


class TestGenerate:
    def test_from_text(self):
        result = generate(schema_text=SCHEMA, package="com.acme")
        assert result.ok
        assert [unit.file_name for unit in result.units] == ["User.java", "Status.java"]
        assert result.units[0].content.startswith("package com.acme;\n")

    def test_from_path_with_includes(self, tmp_path):
        (tmp_path / "schema.graphql").write_text("type User { id: ID! status: Status }")
        (tmp_path / "enums.graphql").write_text("enum Status { ACTIVE }")
        result = generate(schema_path=tmp_path / "schema.graphql", include_patterns=[str(tmp_path / "enums.graphql")])
        assert [unit.file_name for unit in result.units] == ["User.java", "Status.java"]
        assert result.warnings == []

    def test_schema_path_from_config(self, tmp_path):
        (tmp_path / "schema.graphql").write_text(SCHEMA)
        config_path = tmp_path / "config.yaml"
        config_path.write_text("schema:\n  path: schema.graphql\n")
        result = generate(config_path=config_path)
        assert len(result.units) == 2

    def test_no_schema(self):
        with pytest.raises(ConfigError, match="no schema provided"):
            generate()

    def test_config_is_not_modified(self):
        config = GeneratorConfig()
        generate(schema_text=SCHEMA, config=config, package="com.other")
        assert config.output.package == "com.example.model"

    def test_invalid_override(self):
        with pytest.raises(ConfigError):
            generate(schema_text=SCHEMA, java_version=9)

    def test_unknown_override(self):
        with pytest.raises(ConfigError, match="unknown overrides: colour"):
            generate(schema_text=SCHEMA, colour="blue")


class TestApplyOverrides:
    def test_java_8_switches_to_javax(self):
        config = apply_overrides(GeneratorConfig(), java_version=8, enable_validation=True)
        assert config.features.validation.enabled
        assert config.features.validation.package == "javax"

    def test_explicit_validation_package_wins(self):
        config = apply_overrides(GeneratorConfig(), java_version="8", validation_package="jakarta")
        assert config.java.version == 8
        assert config.features.validation.package == "jakarta"

    def test_none_leaves_config_untouched(self):
        config = apply_overrides(GeneratorConfig(), output_dir=None, package=None, enable_lombok=None)
        assert config == GeneratorConfig()


class TestGenerateToDir:
    def test_writes_units(self, tmp_path):
        result = generate_to_dir(schema_text=SCHEMA, output_dir=tmp_path / "out")
        assert result.ok
        assert (tmp_path / "out" / "User.java").exists()
        assert (tmp_path / "out" / "Status.java").exists()

    def test_clean(self, tmp_path):
        (tmp_path / "Old.java").write_text("old")
        generate_to_dir(schema_text=SCHEMA, output_dir=tmp_path, clean=True)
        assert not (tmp_path / "Old.java").exists()
        assert (tmp_path / "User.java").exists()

    def test_write_errors_are_collected(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("x")
        result = generate_to_dir(schema_text=SCHEMA, output_dir=blocker / "out")
        assert not result.ok
        assert "failed to create output directory" in str(result.errors[0])


if __name__ == "__main__":
    pytest.main([__file__])

"""
Tests for configuration loading, validation and merging.
"""

import json

import pytest

from graphql_to_java.config import (
    GeneratorConfig,
    JavaVersionOverride,
    ScalarMapping,
    load_config,
    parse_config,
)
from graphql_to_java.errors import ConfigError, ErrorCollection


class TestConfigDefaults:
    def test_defaults(self):
        config = GeneratorConfig()
        assert config.output.directory == "./generated"
        assert config.output.package == "com.example.model"
        assert config.java.version == 17
        assert config.java.field_visibility == "private"
        assert config.java.collection_type == "List"
        assert config.java.nullable_handling == "wrapper"
        assert config.java.naming.field_case == "camelCase"
        assert config.features.lombok.enabled is False
        assert config.features.lombok.data is True
        assert config.features.lombok.no_args_constructor is True
        assert config.features.validation.package == "jakarta"
        assert config.features.validation.not_null_on_non_null is True
        assert config.validate() == []

    def test_java_8_override_is_declared(self):
        config = GeneratorConfig()
        assert config.java_version_overrides[8].validation_package == "javax"


class TestConfigFromDict:
    """Test both spellings of configuration keys"""

    def test_camel_case_keys(self):
        config = GeneratorConfig.from_dict(
            {
                "output": {"directory": "out", "package": "com.acme.model"},
                "java": {
                    "version": 21,
                    "fieldVisibility": "protected",
                    "collectionType": "Set",
                    "nullableHandling": "optional",
                    "naming": {"fieldCase": "snake_case", "classSuffix": "DTO", "interfacePrefix": "I"},
                },
                "features": {
                    "lombok": {"enabled": True, "builder": True, "noArgsConstructor": False},
                    "validation": {"enabled": True, "notNullOnNonNull": False},
                    "jackson": {"enabled": True},
                },
            }
        )
        assert config.output.package == "com.acme.model"
        assert config.java.version == 21
        assert config.java.field_visibility == "protected"
        assert config.java.collection_type == "Set"
        assert config.java.nullable_handling == "optional"
        assert config.java.naming.field_case == "snake_case"
        assert config.java.naming.class_suffix == "DTO"
        assert config.java.naming.interface_prefix == "I"
        assert config.features.lombok.builder is True
        assert config.features.lombok.no_args_constructor is False
        # Untouched keys keep their defaults
        assert config.features.lombok.data is True
        assert config.features.validation.not_null_on_non_null is False
        assert config.features.jackson.enabled is True

    def test_snake_case_keys(self):
        config = GeneratorConfig.from_dict({"java": {"field_visibility": "public", "collection_type": "Collection"}})
        assert config.java.field_visibility == "public"
        assert config.java.collection_type == "Collection"

    def test_scalar_mappings(self):
        config = GeneratorConfig.from_dict(
            {
                "typeMappings": {
                    "scalars": {
                        "DateTime": {"javaType": "OffsetDateTime", "imports": ["java.time.OffsetDateTime"]},
                        "Money": "BigDecimal",
                    }
                }
            }
        )
        assert config.type_mappings.scalars["DateTime"] == ScalarMapping(
            java_type="OffsetDateTime", imports=["java.time.OffsetDateTime"]
        )
        assert config.type_mappings.scalars["Money"].java_type == "BigDecimal"

    def test_version_overrides(self):
        config = GeneratorConfig.from_dict(
            {"javaVersionOverrides": {"11": {"features": {"validation": {"package": "javax"}}}}}
        )
        assert config.java_version_overrides[11] == JavaVersionOverride(validation_package="javax")
        assert 8 in config.java_version_overrides

    def test_unknown_keys_are_ignored(self):
        config = GeneratorConfig.from_dict({"java": {"unknownSetting": 1}})
        assert not hasattr(config.java, "unknown_setting")

    def test_to_dict_uses_camel_case(self):
        d = GeneratorConfig().to_dict()
        assert d["java"]["fieldVisibility"] == "private"
        assert d["features"]["lombok"]["noArgsConstructor"] is True
        assert d["javaVersionOverrides"][8] == {"features": {"validation": {"package": "javax"}}}

    def test_round_trip(self):
        config = GeneratorConfig.from_dict({"java": {"version": 11, "naming": {"classSuffix": "Dto"}}})
        again = GeneratorConfig.from_dict(config.to_dict())
        assert again == config


class TestConfigValidation:
    def test_every_problem_is_reported(self):
        config = GeneratorConfig()
        config.java.version = 9
        config.java.field_visibility = "internal"
        config.java.collection_type = "Bag"
        config.java.nullable_handling = "ignore"
        config.output.package = "com..acme"
        fields = [error.field for error in config.validate()]
        assert fields == [
            "java.version",
            "java.fieldVisibility",
            "java.collectionType",
            "java.nullableHandling",
            "output.package",
        ]

    def test_check_raises_single_error(self):
        config = GeneratorConfig()
        config.java.version = 10
        with pytest.raises(ConfigError) as exc_info:
            config.check()
        assert exc_info.value.field == "java.version"
        assert "unsupported Java version: 10" in str(exc_info.value)

    def test_check_aggregates_errors(self):
        config = GeneratorConfig()
        config.java.version = 10
        config.java.field_visibility = "internal"
        with pytest.raises(ConfigError) as exc_info:
            config.check()
        assert isinstance(exc_info.value.cause, ErrorCollection)
        assert len(exc_info.value.cause) == 2

    def test_validation_package_checked_when_enabled(self):
        config = GeneratorConfig()
        config.features.validation.package = "hibernate"
        assert config.validate() == []
        config.features.validation.enabled = True
        assert [e.field for e in config.validate()] == ["features.validation.package"]

    def test_empty_package_is_allowed(self):
        config = GeneratorConfig()
        config.output.package = ""
        assert config.validate() == []


class TestConfigOperations:
    def test_java_8_uses_javax(self):
        config = GeneratorConfig()
        config.java.version = 8
        config.apply_version_overrides()
        assert config.features.validation.package == "javax"

    def test_java_17_keeps_jakarta(self):
        config = GeneratorConfig()
        config.apply_version_overrides()
        assert config.features.validation.package == "jakarta"

    def test_merge_overlays_non_empty_values(self):
        base = GeneratorConfig()
        other = GeneratorConfig()
        other.output.package = "com.acme"
        other.output.directory = ""
        other.type_mappings.scalars["Money"] = ScalarMapping(java_type="BigDecimal")
        base.merge(other)
        assert base.output.package == "com.acme"
        assert base.output.directory == "./generated"
        assert base.type_mappings.scalars["Money"].java_type == "BigDecimal"

    def test_merge_covers_naming_features_and_overrides(self):
        base = GeneratorConfig()
        base.java.naming.class_suffix = "Dto"
        other = GeneratorConfig()
        other.java.naming.interface_prefix = "I"
        other.features.lombok.enabled = True
        other.features.lombok.builder = True
        other.features.validation.package = "javax"
        other.java_version_overrides[11] = JavaVersionOverride(validation_package="javax")
        base.merge(other)
        assert base.java.naming.class_suffix == "Dto"
        assert base.java.naming.interface_prefix == "I"
        assert base.features.lombok.enabled
        assert base.features.lombok.builder
        # Disabled sections are left alone
        assert base.features.validation.package == "jakarta"
        assert base.java_version_overrides[11].validation_package == "javax"
        assert base.java_version_overrides[8].validation_package == "javax"
        other.features.lombok.builder = False
        assert base.features.lombok.builder

    def test_merge_none(self):
        config = GeneratorConfig()
        config.merge(None)
        assert config == GeneratorConfig()

    def test_resolve_paths(self, tmp_path):
        config = GeneratorConfig()
        config.schema.path = "schema.graphql"
        config.schema.includes = ["types/*.graphql", "/abs/*.graphql"]
        config.resolve_paths(tmp_path)
        assert config.schema.path == str(tmp_path / "schema.graphql")
        assert config.schema.includes == [str(tmp_path / "types/*.graphql"), "/abs/*.graphql"]
        assert config.output.directory == str(tmp_path / "./generated")

    def test_copy_is_deep(self):
        config = GeneratorConfig()
        copied = config.copy()
        copied.java.naming.class_suffix = "Dto"
        assert config.java.naming.class_suffix == ""


class TestConfigFiles:
    def test_load_yaml(self, tmp_path):
        path = tmp_path / "graphql-to-java.yaml"
        path.write_text(
            "schema:\n"
            "  path: schema.graphql\n"
            "output:\n"
            "  package: com.acme.model\n"
            "java:\n"
            "  version: 8\n"
            "  nullableHandling: annotation\n"
            "typeMappings:\n"
            "  scalars:\n"
            "    DateTime:\n"
            "      javaType: OffsetDateTime\n"
            "      imports: [java.time.OffsetDateTime]\n"
        )
        config = load_config(path)
        assert config.schema.path == "schema.graphql"
        assert config.output.package == "com.acme.model"
        assert config.java.nullable_handling == "annotation"
        assert config.type_mappings.scalars["DateTime"].imports == ["java.time.OffsetDateTime"]
        # Java 8 override applied on load
        assert config.features.validation.package == "javax"

    def test_load_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"java": {"fieldVisibility": "public"}}))
        config = load_config(path)
        assert config.java.field_visibility == "public"

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.yaml")
        assert exc_info.value.field == "path"

    def test_invalid_yaml(self):
        with pytest.raises(ConfigError):
            parse_config("java: [unclosed")

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError, match="must be a mapping"):
            parse_config("- a\n- b\n")

    def test_empty_document_gives_defaults(self):
        assert parse_config("") == GeneratorConfig()

    def test_invalid_values_are_rejected(self):
        with pytest.raises(ConfigError):
            parse_config("java:\n  fieldVisibility: internal\n")


if __name__ == "__main__":
    pytest.main([__file__])

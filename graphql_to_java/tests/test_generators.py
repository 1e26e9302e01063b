#!/usr/bin/env python3
"""
Tests for the per-type Java generators.
"""

import pytest

from graphql_to_java.config import GeneratorConfig
from graphql_to_java.errors import GenerateError
from graphql_to_java.generator import (
    ClassGenerator,
    EnumGenerator,
    GenerationContext,
    InterfaceGenerator,
    UnionGenerator,
)
from graphql_to_java.generator.base import javadoc_lines
from graphql_to_java.schema import FieldDefinition, Schema, TypeDefinition, TypeKind, TypeReference, parse_schema


def render(generator, sdl, type_name, config=None):
    schema = parse_schema(sdl)
    context = GenerationContext.create(config or GeneratorConfig(), schema)
    return generator.generate(context, schema.get_type(type_name))


class TestJavadoc:
    def test_empty(self):
        assert javadoc_lines("") == []
        assert javadoc_lines(None) == []

    def test_multi_line(self):
        assert javadoc_lines("First line\n\nThird */ line") == [
            "/**",
            " * First line",
            " *",
            " * Third *&#47; line",
            " */",
        ]


class TestClassGenerator:
    """Test class generation"""

    def test_full_output(self):
        sdl = '''
        """A registered user"""
        type User {
          id: ID!
          name: String
          age: Int!
          active: Boolean
        }
        '''
        expected = (
            "package com.example.model;\n"
            "\n"
            "/**\n"
            " * A registered user\n"
            " */\n"
            "public class User {\n"
            "\n"
            "    private String id;\n"
            "\n"
            "    private String name;\n"
            "\n"
            "    private int age;\n"
            "\n"
            "    private Boolean active;\n"
            "\n"
            "    public String getId() {\n"
            "        return this.id;\n"
            "    }\n"
            "\n"
            "    public void setId(String id) {\n"
            "        this.id = id;\n"
            "    }\n"
            "\n"
            "    public String getName() {\n"
            "        return this.name;\n"
            "    }\n"
            "\n"
            "    public void setName(String name) {\n"
            "        this.name = name;\n"
            "    }\n"
            "\n"
            "    public int getAge() {\n"
            "        return this.age;\n"
            "    }\n"
            "\n"
            "    public void setAge(int age) {\n"
            "        this.age = age;\n"
            "    }\n"
            "\n"
            "    public Boolean isActive() {\n"
            "        return this.active;\n"
            "    }\n"
            "\n"
            "    public void setActive(Boolean active) {\n"
            "        this.active = active;\n"
            "    }\n"
            "}\n"
        )
        assert render(ClassGenerator(), sdl, "User") == expected

    def test_imports_block(self):
        sdl = "type Event { at: DateTime! tags: [String!]! }"
        code = render(ClassGenerator(), sdl, "Event")
        assert code.startswith(
            "package com.example.model;\n"
            "\n"
            "import java.time.LocalDateTime;\n"
            "\n"
            "import java.util.ArrayList;\n"
            "import java.util.List;\n"
            "\n"
            "public class Event {\n"
        )
        assert "    private List<String> tags;\n" in code

    def test_empty_package(self):
        config = GeneratorConfig()
        config.output.package = ""
        code = render(ClassGenerator(), "type Empty { id: ID }", "Empty", config)
        assert code.startswith("public class Empty {\n")

    def test_implements(self):
        sdl = "interface Node { id: ID! } interface Named { name: String } type User implements Node & Named { id: ID! name: String }"
        config = GeneratorConfig()
        config.java.naming.interface_prefix = "I"
        code = render(ClassGenerator(), sdl, "User", config)
        assert "public class User implements INode, INamed {" in code

    def test_skipped_fields(self):
        sdl = "type User { id: ID! password: String @skip meta: __Type }"
        code = render(ClassGenerator(), sdl, "User")
        assert "password" not in code
        assert "meta" not in code
        assert "private String id;" in code

    def test_skipped_type(self):
        assert render(ClassGenerator(), "type Internal @skip { id: ID }", "Internal") == ""

    def test_visibility(self):
        config = GeneratorConfig()
        config.java.field_visibility = "package"
        code = render(ClassGenerator(), "type User { id: ID }", "User", config)
        assert "    String id;\n" in code
        config.java.field_visibility = "protected"
        code = render(ClassGenerator(), "type User { id: ID }", "User", config)
        assert "    protected String id;\n" in code

    def test_annotation_order(self):
        sdl = """
        type User @deprecated @annotation(value: "@Entity", imports: ["jakarta.persistence.Entity"]) {
          email: String! @deprecated(reason: "gone") @constraint(email: true) @annotation(value: "@Column")
        }
        """
        config = GeneratorConfig()
        config.features.lombok.enabled = True
        config.features.validation.enabled = True
        code = render(ClassGenerator(), sdl, "User", config)
        assert "@Deprecated\n@Data\n@NoArgsConstructor\n@Entity\npublic class User {" in code
        assert "    @Deprecated\n    @NotNull\n    @Email\n    @Column\n    private String email;" in code
        assert "import jakarta.persistence.Entity;" in code
        assert "import jakarta.validation.constraints.Email;" in code
        # @Data provides the accessors
        assert "getEmail" not in code

    def test_keyword_field(self):
        code = render(ClassGenerator(), "type Thing { class: String }", "Thing")
        assert "private String _class;" in code
        assert "public String get_class() {" in code
        assert "public void set_class(String _class) {" in code

    def test_java_type_and_rename(self):
        sdl = """
        type Account @javaName(name: "UserAccount") {
          balance: Int @javaType(type: "Money", imports: ["org.joda.money.Money"])
          user_name: String @javaName(name: "login")
        }
        """
        code = render(ClassGenerator(), sdl, "Account")
        assert "public class UserAccount {" in code
        assert "private Money balance;" in code
        assert "import org.joda.money.Money;" in code
        assert "private String login;" in code

    def test_json_property_for_renamed_fields(self):
        config = GeneratorConfig()
        config.features.jackson.enabled = True
        code = render(ClassGenerator(), "type User { first_name: String id: ID }", "User", config)
        assert '    @JsonProperty("first_name")\n    private String firstName;' in code
        assert code.count("@JsonProperty") == 1
        assert "import com.fasterxml.jackson.annotation.JsonProperty;" in code

    def test_nullable_annotation_policy(self):
        config = GeneratorConfig()
        config.java.nullable_handling = "annotation"
        code = render(ClassGenerator(), "type User { id: ID! nick: String }", "User", config)
        assert "    @Nullable\n    private String nick;" in code
        assert "import jakarta.annotation.Nullable;" in code
        assert code.count("@Nullable") == 1

    def test_malformed_field_raises_generate_error(self):
        broken = TypeDefinition(
            "Broken", TypeKind.OBJECT, fields=[FieldDefinition("bad", TypeReference(name="A", element=TypeReference.named("B")))]
        )
        context = GenerationContext.create(GeneratorConfig(), Schema.of(broken))
        with pytest.raises(GenerateError) as exc_info:
            ClassGenerator().generate(context, broken)
        assert exc_info.value.type_name == "Broken"
        assert exc_info.value.field_name == "bad"


class TestInterfaceGenerator:
    def test_output(self):
        sdl = '''
        interface Entity { id: ID! }
        """Something with a name"""
        interface Named implements Entity {
          id: ID!
          "Display name"
          name: String @deprecated
          enabled: Boolean!
        }
        '''
        expected = (
            "package com.example.model;\n"
            "\n"
            "/**\n"
            " * Something with a name\n"
            " */\n"
            "public interface Named extends Entity {\n"
            "\n"
            "    String getId();\n"
            "\n"
            "    /**\n"
            "     * Display name\n"
            "     */\n"
            "    @Deprecated\n"
            "    String getName();\n"
            "\n"
            "    boolean isEnabled();\n"
            "}\n"
        )
        assert render(InterfaceGenerator(), sdl, "Named") == expected

    def test_no_lombok_on_interfaces(self):
        config = GeneratorConfig()
        config.features.lombok.enabled = True
        code = render(InterfaceGenerator(), "interface Node { id: ID! }", "Node", config)
        assert "@Data" not in code
        assert "lombok" not in code


class TestEnumGenerator:
    def test_skipped_value_and_terminator(self):
        code = render(EnumGenerator(), "enum Status { ACTIVE PENDING @skip INACTIVE }", "Status")
        assert code == (
            "package com.example.model;\n"
            "\n"
            "public enum Status {\n"
            "    ACTIVE,\n"
            "    INACTIVE;\n"
            "}\n"
        )

    def test_last_value_skipped(self):
        code = render(EnumGenerator(), "enum Status { ACTIVE INACTIVE PENDING @skip }", "Status")
        assert "    ACTIVE,\n    INACTIVE;\n}" in code

    def test_value_docs_and_annotations(self):
        sdl = '''
        enum Role {
          "Full access"
          ADMIN @annotation(value: "@JsonProperty(\\"admin\\")", imports: ["com.fasterxml.jackson.annotation.JsonProperty"])
          GUEST @deprecated @javaName(name: "VISITOR")
        }
        '''
        code = render(EnumGenerator(), sdl, "Role")
        assert (
            "    /**\n"
            "     * Full access\n"
            "     */\n"
            '    @JsonProperty("admin")\n'
            "    ADMIN,\n"
            "    @Deprecated\n"
            "    VISITOR;\n"
        ) in code
        assert "import com.fasterxml.jackson.annotation.JsonProperty;" in code


class TestUnionGenerator:
    def test_marker_interface(self):
        sdl = "type A { id: ID } type B { id: ID } union SearchResult = A | B"
        assert render(UnionGenerator(), sdl, "SearchResult") == (
            "package com.example.model;\n"
            "\n"
            "/**\n"
            " * Union type marker interface.\n"
            " */\n"
            "public interface SearchResult {\n"
            "    // Marker interface for GraphQL union type\n"
            "}\n"
        )

    def test_description_replaces_default_doc(self):
        sdl = '"Search hits" union SearchResult = A | B type A { id: ID } type B { id: ID }'
        code = render(UnionGenerator(), sdl, "SearchResult")
        assert " * Search hits\n" in code
        assert "Union type marker interface." not in code


if __name__ == "__main__":
    pytest.main([__file__])

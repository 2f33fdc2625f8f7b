"""Tests for schema module."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from agents_toml.errors import StructuralError
from agents_toml.schema import (
    AgentId,
    ClaudePluginDeclaration,
    GitDeclaration,
    GithubDeclaration,
    KNOWN_AGENT_IDS,
    LocalDeclaration,
    Manifest,
    PackageSection,
    declaration_kind,
    validate_document,
)


def _issues(raw: object) -> list[str]:
    with pytest.raises(StructuralError) as exc_info:
        validate_document(raw)
    return [str(issue) for issue in exc_info.value.issues]


class TestPackageSection:
    """Tests for the package table."""

    def test_required_fields(self) -> None:
        """Test name and version are enough."""
        manifest = validate_document({"package": {"name": "test", "version": "1.0.0"}})
        assert manifest.package == PackageSection(name="test", version="1.0.0")
        assert manifest.package.description is None

    def test_optional_fields(self) -> None:
        """Test description, license and org."""
        manifest = validate_document(
            {
                "package": {
                    "name": "test",
                    "version": "1.0.0",
                    "description": "Skills for testing",
                    "license": "MIT",
                    "org": "acme",
                }
            }
        )
        assert manifest.package.license == "MIT"
        assert manifest.package.org == "acme"

    def test_strings_are_trimmed(self) -> None:
        """Test surrounding whitespace is stripped."""
        manifest = validate_document({"package": {"name": "  test  ", "version": "1.0.0"}})
        assert manifest.package.name == "test"

    def test_whitespace_only_rejected(self) -> None:
        """Test whitespace-only strings count as empty."""
        issues = _issues({"package": {"name": "   ", "version": "1.0.0"}})
        assert len(issues) == 1
        assert issues[0].startswith("package.name:")

    def test_missing_version(self) -> None:
        """Test version is required."""
        issues = _issues({"package": {"name": "test"}})
        assert any(issue.startswith("package.version:") for issue in issues)

    def test_non_string_rejected(self) -> None:
        """Test numbers are not coerced to strings."""
        issues = _issues({"package": {"name": "test", "version": 1}})
        assert any(issue.startswith("package.version:") for issue in issues)

    def test_unknown_key_rejected(self) -> None:
        """Test the package table is closed."""
        issues = _issues({"package": {"name": "test", "version": "1", "author": "me"}})
        assert any(issue.startswith("package.author:") for issue in issues)


class TestAgentsSection:
    """Tests for the agents table."""

    def test_defaults_to_empty(self) -> None:
        """Test a missing agents table is empty."""
        assert validate_document({}).agents == {}

    def test_unknown_agents_accepted(self) -> None:
        """Test any agent key passes structural validation."""
        manifest = validate_document({"agents": {"claude-code": True, "future-agent": False}})
        assert manifest.agents == {"claude-code": True, "future-agent": False}

    @pytest.mark.parametrize("value", [1, "true", "yes", 0])
    def test_non_boolean_rejected(self, value: object) -> None:
        """Test agent flags must be real booleans."""
        issues = _issues({"agents": {"codex": value}})
        assert any(issue.startswith("agents.codex:") for issue in issues)

    def test_known_agent_ids(self) -> None:
        """Test the known agent set."""
        assert KNOWN_AGENT_IDS == {"claude-code", "codex", "opencode"}
        assert AgentId("codex") is AgentId.CODEX


class TestDependencyAliases:
    """Tests for dependency alias keys."""

    @pytest.mark.parametrize("alias", ["a/b", "a\\b", "a.b", "a:b"])
    def test_reserved_characters_rejected(self, alias: str) -> None:
        """Test aliases cannot contain path-like characters."""
        issues = _issues({"dependencies": {alias: {"path": "../x"}}})
        assert any("Alias cannot contain" in issue for issue in issues)

    def test_blank_alias_rejected(self) -> None:
        """Test an alias must be non-empty after trimming."""
        issues = _issues({"dependencies": {"  ": {"path": "../x"}}})
        assert issues

    def test_alias_is_trimmed(self) -> None:
        """Test alias whitespace is stripped."""
        manifest = validate_document({"dependencies": {" local ": {"path": "../x"}}})
        assert list(manifest.dependencies) == ["local"]

    def test_duplicate_after_trim_rejected(self) -> None:
        """Test aliases that only differ by surrounding whitespace collide."""
        issues = _issues({"dependencies": {" a": "x@1.0.0", "a": "y@2.0.0"}})
        assert len(issues) == 1
        assert issues[0].startswith("dependencies: ")
        assert "Duplicate alias 'a'" in issues[0]


class TestDependencyShapes:
    """Tests for dependency declaration shapes."""

    def test_registry_string_kept_raw(self) -> None:
        """Test shorthand strings are not grammar-checked structurally."""
        manifest = validate_document({"dependencies": {"x": "not a registry ref"}})
        assert manifest.dependencies["x"] == "not a registry ref"

    def test_github_shape(self) -> None:
        """Test gh tables become GithubDeclaration."""
        manifest = validate_document(
            {"dependencies": {"sensei": {"gh": "sensei-marketplace/sensei", "tag": "v2.0.0"}}}
        )
        decl = manifest.dependencies["sensei"]
        assert isinstance(decl, GithubDeclaration)
        assert decl.tag == "v2.0.0"
        assert decl.branch is None

    def test_git_shape(self) -> None:
        """Test git tables become GitDeclaration."""
        manifest = validate_document(
            {"dependencies": {"g": {"git": "https://gitlab.com/org/repo.git", "rev": "abc123"}}}
        )
        assert isinstance(manifest.dependencies["g"], GitDeclaration)

    def test_local_shape(self) -> None:
        """Test path-only tables become LocalDeclaration."""
        manifest = validate_document({"dependencies": {"local": {"path": "../my-skills"}}})
        assert manifest.dependencies["local"] == LocalDeclaration(path="../my-skills")

    def test_claude_plugin_shape(self) -> None:
        """Test claude-plugin tables."""
        manifest = validate_document(
            {
                "dependencies": {
                    "playwright": {
                        "type": "claude-plugin",
                        "plugin": "playwright",
                        "marketplace": "anthropics/claude-plugins",
                    }
                }
            }
        )
        assert isinstance(manifest.dependencies["playwright"], ClaudePluginDeclaration)

    def test_github_with_path(self) -> None:
        """Test a gh table may carry a path."""
        manifest = validate_document(
            {"dependencies": {"d": {"gh": "org/repo", "branch": "main", "path": "packages/core"}}}
        )
        assert manifest.dependencies["d"].path == "packages/core"

    @pytest.mark.parametrize("gh", ["org", "org/repo/extra", "o rg/repo", "org/", "/repo"])
    def test_invalid_gh_format(self, gh: str) -> None:
        """Test gh must be owner/repo."""
        issues = _issues({"dependencies": {"d": {"gh": gh}}})
        assert any(issue.startswith("dependencies.d.") for issue in issues)

    def test_gh_allows_dots_and_underscores(self) -> None:
        """Test owner and repo character set."""
        manifest = validate_document({"dependencies": {"d": {"gh": "my_org/repo.js"}}})
        assert manifest.dependencies["d"].gh == "my_org/repo.js"

    @pytest.mark.parametrize(
        "refs",
        [
            {"tag": "v1", "branch": "main"},
            {"tag": "v1", "rev": "abc"},
            {"branch": "main", "rev": "abc"},
            {"tag": "v1", "branch": "main", "rev": "abc"},
        ],
    )
    @pytest.mark.parametrize("source", [{"gh": "org/repo"}, {"git": "https://x.org/r"}])
    def test_multiple_refs_rejected(
        self, source: dict[str, str], refs: dict[str, str]
    ) -> None:
        """Test at most one of tag, branch, rev."""
        issues = _issues({"dependencies": {"bad": {**source, **refs}}})
        assert len(issues) == 1
        assert issues[0].startswith("dependencies.bad: ")
        for name in refs:
            assert f"'{name}'" in issues[0]

    def test_no_ref_allowed(self) -> None:
        """Test refs are optional."""
        manifest = validate_document({"dependencies": {"d": {"gh": "org/repo"}}})
        decl = manifest.dependencies["d"]
        assert (decl.tag, decl.branch, decl.rev) == (None, None, None)

    @pytest.mark.parametrize(
        "decl",
        [
            {"gh": "org/repo", "version": "1"},
            {"git": "https://x.org/r", "gh": "org/repo"},
            {"path": "../x", "tag": "v1"},
            {"type": "claude-plugin", "plugin": "p", "marketplace": "m", "path": "x"},
        ],
    )
    def test_unknown_keys_rejected(self, decl: dict[str, str]) -> None:
        """Test every dependency table is closed."""
        assert _issues({"dependencies": {"d": decl}})

    @pytest.mark.parametrize("alias", ["sensei", "github", "local"])
    def test_issue_path_matches_document(self, alias: str) -> None:
        """Test issue paths name the alias and key, not the matched shape."""
        issues = _issues({"dependencies": {alias: {"gh": "a/b", "extra": "x"}}})
        assert issues == [f"dependencies.{alias}.extra: Extra inputs are not permitted"]

    def test_nested_field_path(self) -> None:
        """Test a bad field inside a git table is reported at its own path."""
        issues = _issues({"dependencies": {"mirror": {"git": "https://x.org/r", "tag": ""}}})
        assert len(issues) == 1
        assert issues[0].startswith("dependencies.mirror.tag: ")

    def test_unrecognized_table_rejected(self) -> None:
        """Test a table without an identifying key."""
        issues = _issues({"dependencies": {"d": {"version": "1.0.0"}}})
        assert len(issues) == 1
        assert issues[0].startswith("dependencies.d:")
        assert "Dependency must be" in issues[0]

    def test_non_string_non_table_rejected(self) -> None:
        """Test booleans and lists are not dependencies."""
        assert _issues({"dependencies": {"d": True}})
        assert _issues({"dependencies": {"d": ["a@1"]}})

    def test_wrong_plugin_type_rejected(self) -> None:
        """Test the type marker must be claude-plugin."""
        issues = _issues(
            {"dependencies": {"d": {"type": "npm", "plugin": "p", "marketplace": "m"}}}
        )
        assert any(issue.startswith("dependencies.d.") for issue in issues)

    def test_declaration_kind(self) -> None:
        """Test shape selection by identifying key."""
        assert declaration_kind("a@1") == "registry"
        assert declaration_kind({"gh": "o/r", "path": "x"}) == "github"
        assert declaration_kind({"git": "u"}) == "git"
        assert declaration_kind({"type": "claude-plugin"}) == "claude-plugin"
        assert declaration_kind({"path": "x"}) == "local"
        assert declaration_kind({"name": "x"}) is None
        assert declaration_kind(LocalDeclaration(path="x")) == "local"
        assert declaration_kind(3) is None


class TestExportsSection:
    """Tests for the exports table."""

    def test_skills_directory(self) -> None:
        """Test auto_discover.skills as a directory."""
        manifest = validate_document({"exports": {"auto_discover": {"skills": "skills"}}})
        assert manifest.exports.auto_discover.skills == "skills"

    def test_skills_false(self) -> None:
        """Test auto_discover.skills = false."""
        manifest = validate_document({"exports": {"auto_discover": {"skills": False}}})
        assert manifest.exports.auto_discover.skills is False

    @pytest.mark.parametrize("skills", [True, "", "  ", 1.5, 0, 1])
    def test_invalid_skills(self, skills: object) -> None:
        """Test only a non-empty string or false is accepted."""
        issues = _issues({"exports": {"auto_discover": {"skills": skills}}})
        assert all(issue.startswith("exports.auto_discover.skills") for issue in issues)

    def test_unknown_keys_rejected(self) -> None:
        """Test exports and auto_discover are closed."""
        assert _issues({"exports": {"skills": "x"}})
        assert _issues({"exports": {"auto_discover": {"agents": "x"}}})


class TestManifest:
    """Tests for the top-level manifest."""

    def test_empty_document(self) -> None:
        """Test an empty document is a valid manifest."""
        manifest = validate_document({})
        assert manifest.package is None
        assert manifest.dependencies == {}
        assert manifest.exports is None

    def test_unknown_section_rejected(self) -> None:
        """Test only the four sections are allowed."""
        issues = _issues({"agents": {}, "unknown_section": {"foo": "bar"}})
        assert issues == ["unknown_section: Extra inputs are not permitted"]

    def test_all_issues_collected(self) -> None:
        """Test one pass reports every violation."""
        issues = _issues(
            {
                "package": {"name": " "},
                "agents": {"codex": "yes"},
                "exports": {"extra": 1},
            }
        )
        paths = {issue.split(":", 1)[0] for issue in issues}
        assert {"package.name", "package.version", "agents.codex", "exports.extra"} <= paths

    def test_non_mapping_document(self) -> None:
        """Test the root must be a table."""
        issues = _issues(["not", "a", "table"])
        assert issues[0].startswith("(root):")

    def test_models_are_frozen(self) -> None:
        """Test structural models cannot be mutated."""
        manifest = validate_document({"package": {"name": "a", "version": "1"}})
        with pytest.raises(PydanticValidationError):
            manifest.package.name = "b"

    def test_json_schema_is_closed(self) -> None:
        """Test the declared shapes are introspectable."""
        schema = Manifest.model_json_schema()
        assert set(schema["properties"]) == {"package", "agents", "dependencies", "exports"}
        assert schema["additionalProperties"] is False
        package = schema["$defs"]["PackageSection"]
        assert package["additionalProperties"] is False
        assert package["required"] == ["name", "version"]

"""Tests for whole-run codesnippet injection and verification."""

from pathlib import Path

import pytest

from snippet_injector import (
    InjectionConfig,
    inject_codesnippets,
    max_line_length_rule,
    verify_codesnippets,
)
from utils.exceptions import ConfigError, DuplicateDefinitionError, SnippetVerificationError


def _config(root: Path, **overrides) -> InjectionConfig:
    return InjectionConfig(
        codesnippet_root=root / "samples",
        sources_root=root / "src",
        readme_path=root / "README.md",
        **overrides,
    )


class TestInjectCodesnippets:
    def test_injects_sources_and_readme(self, tmp_project_dir: Path) -> None:
        report = inject_codesnippets(_config(tmp_project_dir))

        source = (tmp_project_dir / "src" / "Client.java").read_text()
        assert " * <pre>\n" in source
        assert " * Client client = new ClientBuilder&#40;&#41;\n" in source
        assert "     .endpoint&#40;&quot;https:&#47;&#47;example.com&quot;&#41;\n" in source
        assert "stale content" not in source

        readme = (tmp_project_dir / "README.md").read_text()
        assert readme == (
            "# Example\n"
            "\n"
            "```java com.example.client.create\n"
            "Client client = new ClientBuilder()\n"
            "    .endpoint(\"https://example.com\")\n"
            "    .build();\n"
            "```\n"
        )

        assert report.definitions == 1
        assert len(report.files_processed) == 2
        assert len(report.files_updated) == 2

    def test_second_run_is_idempotent(self, tmp_project_dir: Path) -> None:
        config = _config(tmp_project_dir)
        inject_codesnippets(config)
        source = (tmp_project_dir / "src" / "Client.java").read_bytes()
        readme = (tmp_project_dir / "README.md").read_bytes()

        report = inject_codesnippets(config)

        assert (tmp_project_dir / "src" / "Client.java").read_bytes() == source
        assert (tmp_project_dir / "README.md").read_bytes() == readme
        assert report.files_updated == []

    def test_noop_when_nothing_included(self, tmp_path: Path) -> None:
        config = InjectionConfig(
            codesnippet_root=tmp_path / "missing",
            sources_root=tmp_path / "missing",
            include_sources=False,
            include_readme=False,
        )
        report = inject_codesnippets(config)
        assert report.skipped is True

    def test_missing_sources_root_is_config_error(self, tmp_project_dir: Path) -> None:
        config = _config(tmp_project_dir, include_readme=False)
        config.sources_root = tmp_project_dir / "nope"
        with pytest.raises(ConfigError, match="to be a directory"):
            inject_codesnippets(config)

    def test_missing_codesnippet_root_yields_no_definitions(self, tmp_project_dir: Path) -> None:
        config = _config(tmp_project_dir, include_sources=False)
        config.codesnippet_root = tmp_project_dir / "nope"
        with pytest.raises(SnippetVerificationError):
            inject_codesnippets(config)

    def test_missing_readme_is_config_error(self, tmp_project_dir: Path) -> None:
        config = _config(tmp_project_dir, include_sources=False)
        config.readme_path = tmp_project_dir / "NOPE.md"
        with pytest.raises(ConfigError):
            inject_codesnippets(config)

    def test_duplicates_fail_before_injection(self, tmp_project_dir: Path) -> None:
        (tmp_project_dir / "samples" / "Other.java").write_text(
            "// BEGIN: com.example.client.create\nx\n// END: com.example.client.create\n"
        )
        before = (tmp_project_dir / "README.md").read_text()

        with pytest.raises(DuplicateDefinitionError):
            inject_codesnippets(_config(tmp_project_dir))

        assert (tmp_project_dir / "README.md").read_text() == before

    def test_missing_reference_reported_and_valid_sites_written(self, tmp_project_dir: Path) -> None:
        readme = tmp_project_dir / "README.md"
        readme.write_text(
            "```java com.example.client.create\n```\n"
            "```java missing1\n```\n"
        )

        with pytest.raises(SnippetVerificationError) as exc_info:
            inject_codesnippets(_config(tmp_project_dir, include_sources=False))

        error = exc_info.value
        assert [r.alias for r in error.missing] == ["missing1"]
        assert error.bad == []
        assert f"Unable to locate codesnippet with alias 'missing1' referenced in '{readme}:3'." in str(error)
        assert "Client client = new ClientBuilder()" in readme.read_text()

    def test_errors_collected_across_files(self, tmp_project_dir: Path) -> None:
        (tmp_project_dir / "src" / "Other.java").write_text(
            "/**\n * <!-- src_embed gone -->\n * <!-- end gone -->\n */\n"
        )
        (tmp_project_dir / "README.md").write_text("```java also.gone\n```\n")

        with pytest.raises(SnippetVerificationError) as exc_info:
            inject_codesnippets(_config(tmp_project_dir))

        assert sorted(r.alias for r in exc_info.value.missing) == ["also.gone", "gone"]

    def test_line_length_rule(self, tmp_project_dir: Path) -> None:
        config = _config(tmp_project_dir, max_line_length=20, enforce_max_line_length=True)

        with pytest.raises(SnippetVerificationError) as exc_info:
            inject_codesnippets(config)

        assert len(exc_info.value.bad) == 2
        assert "didn't follow codesnippet rules" in str(exc_info.value)
        # Bad codesnippets are still injected
        assert "Client client" in (tmp_project_dir / "README.md").read_text()

    def test_line_length_not_enforced_by_default(self, tmp_project_dir: Path) -> None:
        inject_codesnippets(_config(tmp_project_dir, max_line_length=20))

    def test_max_line_length_rule(self) -> None:
        rule = max_line_length_rule(5)
        assert rule(None, ["12345"]) is True
        assert rule(None, ["123456"]) is False


class TestVerifyCodesnippets:
    def test_out_of_date_files_reported_not_written(self, tmp_project_dir: Path) -> None:
        source = tmp_project_dir / "src" / "Client.java"
        before = source.read_text()

        with pytest.raises(SnippetVerificationError) as exc_info:
            verify_codesnippets(_config(tmp_project_dir))

        assert set(exc_info.value.out_of_date) == {source.resolve(), tmp_project_dir / "README.md"}
        assert "out of date" in str(exc_info.value)
        assert source.read_text() == before

    def test_passes_after_inject(self, tmp_project_dir: Path) -> None:
        config = _config(tmp_project_dir)
        inject_codesnippets(config)

        report = verify_codesnippets(config)

        assert report.files_out_of_date == []
        assert len(report.files_processed) == 2

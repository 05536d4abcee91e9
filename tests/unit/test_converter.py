"""Unit tests for the conversion pipeline."""

from pathlib import Path

import pytest

from tests.fixtures.projects import filter_names, read_filters, written_items
from vcproj2filter.config.settings import OutputConfig, Settings
from vcproj2filter.core.converter import convert_project, default_output_path
from vcproj2filter.utils.errors import FilterWriteError, ProjectFormatError, ProjectLoadError


@pytest.mark.unit
def test_default_output_path_appends_suffix() -> None:
    assert default_output_path(Path("dir/app.vcxproj")) == Path("dir/app.vcxproj.filters")
    assert default_output_path("app.vcxproj", ".flt") == Path("app.vcxproj.flt")


@pytest.mark.unit
class TestConvertProject:
    """Tests for convert_project."""

    def test_writes_filters_next_to_project(self, sample_project, test_settings) -> None:
        result = convert_project(sample_project, settings=test_settings)

        expected = sample_project.with_name("sample.vcxproj.filters")
        assert result.output_path == expected
        assert expected.exists()
        assert result.project_path == sample_project
        assert result.filter_count == 4
        assert result.entry_counts == {"ClCompile": 3, "ClInclude": 2, "None": 2}
        assert result.total_entries == 7

    def test_sample_output_content(self, sample_project, test_settings) -> None:
        result = convert_project(sample_project, settings=test_settings)
        root = read_filters(result.output_path)

        assert filter_names(root) == ["docs", "include", "src\\core", "src\\util"]
        assert written_items(root) == [
            ("ClCompile", "main.cpp", None),
            ("ClCompile", "src\\core\\engine.cpp", "src\\core"),
            ("ClCompile", ".\\src\\util\\log.cpp", "src\\util"),
            ("ClInclude", "src\\core\\engine.h", "src\\core"),
            ("ClInclude", "..\\include\\api.h", "include"),
            ("None", "README.md", None),
            ("None", "docs\\notes.txt", "docs"),
        ]

    def test_single_compile_item(self, write_project, test_settings) -> None:
        path = write_project('<ClCompile Include="src\\foo\\bar.cpp" />')

        root = read_filters(convert_project(path, settings=test_settings).output_path)

        assert filter_names(root) == ["src\\foo"]
        assert written_items(root) == [("ClCompile", "src\\foo\\bar.cpp", "src\\foo")]

    def test_explicit_output_path(self, write_project, tmp_path, test_settings) -> None:
        path = write_project('<ClCompile Include="bar.cpp" />')
        output = tmp_path / "custom.filters"

        result = convert_project(path, output_path=output, settings=test_settings)

        assert result.output_path == output
        assert written_items(read_filters(output)) == [("ClCompile", "bar.cpp", None)]
        assert not path.with_name(path.name + ".filters").exists()

    def test_configured_suffix_and_indent(self, write_project) -> None:
        path = write_project('<None Include="a.txt" />')
        settings = Settings(_env_file=None, output=OutputConfig(suffix=".flt", indent="\t"))

        result = convert_project(path, settings=settings)

        assert result.output_path.name == "project.vcxproj.flt"
        assert "\n\t<ItemGroup" in result.output_path.read_text(encoding="utf-8")

    def test_uses_cached_settings_by_default(self, write_project, monkeypatch) -> None:
        monkeypatch.setenv("VCPROJ2FILTER_OUTPUT__SUFFIX", ".vsfilters")
        path = write_project('<None Include="a.txt" />')

        result = convert_project(path)

        assert result.output_path.name == "project.vcxproj.vsfilters"

    def test_missing_project_produces_no_output(self, tmp_path, test_settings) -> None:
        missing = tmp_path / "missing.vcxproj"

        with pytest.raises(ProjectLoadError):
            convert_project(missing, settings=test_settings)

        assert not default_output_path(missing).exists()

    def test_non_project_document(self, tmp_path, test_settings) -> None:
        path = tmp_path / "data.xml"
        path.write_text("<Data />", encoding="utf-8")

        with pytest.raises(ProjectFormatError):
            convert_project(path, settings=test_settings)

        assert not default_output_path(path).exists()

    def test_unwritable_output(self, write_project, tmp_path, test_settings) -> None:
        path = write_project('<None Include="a.txt" />')

        with pytest.raises(FilterWriteError):
            convert_project(path, output_path=tmp_path / "no" / "x.filters", settings=test_settings)

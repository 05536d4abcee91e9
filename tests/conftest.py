"""
Pytest configuration and shared fixtures.

Provides builders for MSBuild project files and isolates every test from
VCPROJ2FILTER_ environment variables and stray .env files.
"""

import os
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from vcproj2filter.config.settings import Settings, get_settings
from vcproj2filter.core.writer import MSBUILD_NAMESPACE

SAMPLE_PROJECT = r"""<?xml version="1.0" encoding="utf-8"?>
<Project DefaultTargets="Build" ToolsVersion="4.0" xmlns="http://schemas.microsoft.com/developer/msbuild/2003">
  <ItemGroup Label="ProjectConfigurations">
    <ProjectConfiguration Include="Debug|Win32">
      <Configuration>Debug</Configuration>
      <Platform>Win32</Platform>
    </ProjectConfiguration>
    <ClCompile Include="config\ignored.cpp" />
  </ItemGroup>
  <ItemGroup>
    <ClCompile Include="main.cpp" />
    <ClCompile Include="src\core\engine.cpp" />
    <ClCompile Include=".\src\util\log.cpp" />
  </ItemGroup>
  <ItemGroup>
    <ClInclude Include="src\core\engine.h" />
    <ClInclude Include="..\include\api.h" />
  </ItemGroup>
  <ItemGroup>
    <None Include="README.md" />
    <None Include="docs\notes.txt" />
  </ItemGroup>
</Project>
"""


@pytest.fixture(autouse=True)
def isolated_settings(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[None, None, None]:
    """Clear VCPROJ2FILTER_ env vars and run each test from an empty directory."""
    for key in list(os.environ):
        if key.startswith("VCPROJ2FILTER_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """Settings built from defaults only."""
    return Settings(_env_file=None)


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """A realistic .vcxproj with labelled, compile, include and None groups."""
    path = tmp_path / "sample.vcxproj"
    path.write_text(SAMPLE_PROJECT, encoding="utf-8")
    return path


@pytest.fixture
def write_project(tmp_path: Path) -> Callable[..., Path]:
    """
    Factory writing a project file from item group bodies.

    Usage:
        path = write_project('<ClCompile Include="a.cpp" />')
        path = write_project(group_a, group_b, name="two.vcxproj")
    """

    def _write(*item_groups: str, name: str = "project.vcxproj", namespace: bool = True) -> Path:
        xmlns = f' xmlns="{MSBUILD_NAMESPACE}"' if namespace else ""
        groups = "\n".join(
            group if group.lstrip().startswith("<ItemGroup") else f"<ItemGroup>{group}</ItemGroup>"
            for group in item_groups
        )
        path = tmp_path / name
        path.write_text(
            f'<?xml version="1.0" encoding="utf-8"?>\n'
            f'<Project ToolsVersion="4.0"{xmlns}>\n{groups}\n</Project>\n',
            encoding="utf-8",
        )
        return path

    return _write

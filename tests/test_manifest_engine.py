from __future__ import annotations

from pathlib import Path

import pytest

from steam_deploy.api.exceptions import ConfigError, ManifestError
from steam_deploy.core.manifest_engine import ManifestEngine
from steam_deploy.utils.file_utils import LocalFileSystem


class ReadBackFailure(LocalFileSystem):
    def check_readable(self, path: Path) -> None:
        raise PermissionError(f"Permission denied: '{path}'")


@pytest.fixture
def engine(tmp_path: Path) -> ManifestEngine:
    return ManifestEngine(tmp_path / ".steamworks")


def test_depots_are_numbered_from_app_id_plus_one(engine: ManifestEngine) -> None:
    path = engine.generate_build_manifest("480", "/build", depots=["linux64", "windows"])

    assert path.name == "app_build.vdf"
    assert path.read_text(encoding="utf-8") == (
        '"AppBuild"\n'
        "{\n"
        '\t"AppID" "480"\n'
        '\t"ContentRoot" "/build"\n'
        '\t"Depots"\n'
        "\t{\n"
        '\t\t"481" "linux64"\n'
        '\t\t"482" "windows"\n'
        "\t}\n"
        "}"
    )


def test_depot_list_ignores_exclusions_and_scripts(engine: ManifestEngine) -> None:
    text = engine.render_build_manifest(
        "1000", "/c", file_exclusions=["*.pdb"], install_scripts=["setup.vdf"], depots=["a", "b", "c"]
    )

    assert '"1001" "a"' in text
    assert '"1002" "b"' in text
    assert '"1003" "c"' in text
    assert "FileExclusion" not in text
    assert "FileMapping" not in text


def test_default_depot_maps_whole_content_root(engine: ManifestEngine) -> None:
    text = engine.render_build_manifest(
        "480",
        "/build",
        file_exclusions=["*.pdb", "*.map"],
        install_scripts=["install.vdf"],
    )

    assert text == (
        '"AppBuild"\n'
        "{\n"
        '\t"AppID" "480"\n'
        '\t"ContentRoot" "/build"\n'
        '\t"Depots"\n'
        "\t{\n"
        '\t\t"DepotID" "481"\n'
        '\t\t"FileMapping"\n'
        "\t\t{\n"
        '\t\t\t"LocalPath" "*" // all files from content root folder\n'
        '\t\t\t"DepotPath" "." // mapped into the root of the depot\n'
        '\t\t\t"recursive" "1" // include all subfolders\n'
        "\t\t}\n"
        '\t\t"FileExclusion" "*.pdb"\n'
        '\t\t"FileExclusion" "*.map"\n'
        '\t\t"InstallScript" "install.vdf"\n'
        "\t}\n"
        "}"
    )


def test_optional_fields_omitted_when_missing(engine: ManifestEngine) -> None:
    text = engine.render_build_manifest("480", "/build")

    assert "Desc" not in text
    assert "SetLive" not in text


def test_optional_fields_present_once_when_given(engine: ManifestEngine) -> None:
    text = engine.render_build_manifest("480", "/build", description="Nightly 42", set_live="beta")

    assert text.count('"Desc" "Nightly 42"') == 1
    assert text.count('"SetLive" "beta"') == 1


def test_description_quotes_are_escaped(engine: ManifestEngine) -> None:
    text = engine.render_build_manifest("480", "/build", description='fix "crash"\non load')

    assert '\t"Desc" "fix \\"crash\\"\\non load"\n' in text


def test_non_numeric_app_id_is_a_config_error(engine: ManifestEngine) -> None:
    with pytest.raises(ConfigError):
        engine.render_build_manifest("spacewar", "/build")


def test_workshop_manifest(engine: ManifestEngine) -> None:
    path = engine.generate_workshop_manifest("480", "123456", "/mod", description="First upload")

    assert path.name == "workshop_item.vdf"
    assert path.read_text(encoding="utf-8") == (
        '"workshopitem"\n'
        "{\n"
        '\t"appid" "480"\n'
        '\t"publishedfileid" "123456"\n'
        '\t"contentfolder" "/mod"\n'
        '\t"changenote" "First upload"\n'
        "}"
    )


def test_workshop_manifest_without_change_note(engine: ManifestEngine) -> None:
    text = engine.render_workshop_manifest("480", "123456", "/mod")

    assert "changenote" not in text


def test_scratch_directory_is_recreated(engine: ManifestEngine) -> None:
    engine.scratch_dir.mkdir(parents=True)
    stale = engine.scratch_dir / "stale.vdf"
    stale.write_text("old", encoding="utf-8")

    engine.generate_workshop_manifest("480", "1", "/mod")

    assert not stale.exists()
    assert sorted(p.name for p in engine.scratch_dir.iterdir()) == ["workshop_item.vdf"]


def test_failed_read_back_raises_manifest_error(tmp_path: Path) -> None:
    engine = ManifestEngine(tmp_path / ".steamworks", ReadBackFailure())

    with pytest.raises(ManifestError) as excinfo:
        engine.generate_build_manifest("480", "/build")

    assert excinfo.value.path == tmp_path / ".steamworks" / "app_build.vdf"

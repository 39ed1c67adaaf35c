# steam_deploy/core/manifest_engine.py
"""Manifest engine for generating steamcmd build documents"""

import logging
from pathlib import Path
from typing import List, Optional

from .vdf_writer import VdfDocument
from ..api.exceptions import ConfigError, ManifestError
from ..constants import APP_BUILD_FILE, WORKSHOP_ITEM_FILE
from ..utils.file_utils import LocalFileSystem

logger = logging.getLogger(__name__)


def _depot_id(app_id: str, offset: int) -> str:
    try:
        return str(int(app_id) + offset)
    except (TypeError, ValueError):
        raise ConfigError(f"app_id must be numeric to derive depot ids, got: {app_id!r}")


class ManifestEngine:
    """Engine for rendering and persisting build manifests"""

    def __init__(self, scratch_dir: Path, file_system: Optional[LocalFileSystem] = None):
        """Initialize manifest engine

        Args:
            scratch_dir: Directory receiving generated manifests, recreated per manifest
            file_system: File access implementation
        """
        self.scratch_dir = Path(scratch_dir)
        self.file_system = file_system or LocalFileSystem()

    def render_build_manifest(self,
                              app_id: str,
                              content_root: str,
                              description: Optional[str] = None,
                              set_live: Optional[str] = None,
                              file_exclusions: Optional[List[str]] = None,
                              install_scripts: Optional[List[str]] = None,
                              depots: Optional[List[str]] = None) -> str:
        """Render app build manifest text

        Args:
            app_id: Application id
            content_root: Directory holding the build content
            description: Build description
            set_live: Branch to set the build live on
            file_exclusions: Exclusion patterns for the default depot
            install_scripts: Install scripts for the default depot
            depots: Depot build scripts, one depot per entry

        Returns:
            VDF text
        """
        doc = VdfDocument("AppBuild")
        doc.add("AppID", app_id)
        doc.add("ContentRoot", content_root)
        doc.add_optional("Desc", description)
        doc.add_optional("SetLive", set_live)

        depots_block = doc.block("Depots")
        if depots:
            for index, depot in enumerate(depots, 1):
                depots_block.add(_depot_id(app_id, index), depot)
        else:
            depots_block.add("DepotID", _depot_id(app_id, 1))
            mapping = depots_block.block("FileMapping")
            mapping.add("LocalPath", "*", comment="all files from content root folder")
            mapping.add("DepotPath", ".", comment="mapped into the root of the depot")
            mapping.add("recursive", "1", comment="include all subfolders")

            for exclusion in file_exclusions or []:
                depots_block.add("FileExclusion", exclusion)

            for script in install_scripts or []:
                depots_block.add("InstallScript", script)

        return doc.render()

    def render_workshop_manifest(self,
                                 app_id: str,
                                 workshop_item_id: str,
                                 content_root: str,
                                 description: Optional[str] = None) -> str:
        """Render workshop item manifest text"""
        doc = VdfDocument("workshopitem")
        doc.add("appid", app_id)
        doc.add("publishedfileid", workshop_item_id)
        doc.add("contentfolder", content_root)
        doc.add_optional("changenote", description)
        return doc.render()

    def generate_build_manifest(self,
                                app_id: str,
                                content_root: str,
                                description: Optional[str] = None,
                                set_live: Optional[str] = None,
                                file_exclusions: Optional[List[str]] = None,
                                install_scripts: Optional[List[str]] = None,
                                depots: Optional[List[str]] = None) -> Path:
        """Generate app build manifest in the scratch directory

        Returns:
            Path to the written manifest
        """
        content = self.render_build_manifest(
            app_id,
            content_root,
            description=description,
            set_live=set_live,
            file_exclusions=file_exclusions,
            install_scripts=install_scripts,
            depots=depots,
        )
        return self._save(APP_BUILD_FILE, content)

    def generate_workshop_manifest(self,
                                   app_id: str,
                                   workshop_item_id: str,
                                   content_root: str,
                                   description: Optional[str] = None) -> Path:
        """Generate workshop item manifest in the scratch directory

        Returns:
            Path to the written manifest
        """
        content = self.render_workshop_manifest(app_id, workshop_item_id, content_root, description)
        return self._save(WORKSHOP_ITEM_FILE, content)

    def _save(self, filename: str, content: str) -> Path:
        manifest_path = self.scratch_dir / filename
        logger.debug("Generated %s:\n%s", filename, content)

        try:
            self.file_system.recreate_directory(self.scratch_dir)
            self.file_system.write_text(manifest_path, content)
            self.file_system.check_readable(manifest_path)
        except OSError as e:
            raise ManifestError(f"Failed to write manifest {manifest_path}: {e}", manifest_path) from e

        return manifest_path

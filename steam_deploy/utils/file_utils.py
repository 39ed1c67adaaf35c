# steam_deploy/utils/file_utils.py
"""File operation utilities"""

import os
import shutil
from pathlib import Path
from typing import List

import aiofiles


class LocalFileSystem:
    """Narrow file access interface used by the manifest and log components

    Tests substitute their own implementation to avoid touching the disk.
    All methods raise ``OSError`` subclasses on failure.
    """

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def check_readable(self, path: Path) -> None:
        """
        Ensure path exists and is readable

        Args:
            path: Path to check

        Raises:
            FileNotFoundError: Path does not exist
            PermissionError: Path is not readable
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"No such file or directory: '{path}'")
        if not os.access(path, os.R_OK):
            raise PermissionError(f"Permission denied: '{path}'")

    def write_text(self, path: Path, content: str) -> None:
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(content)

    def write_bytes(self, path: Path, content: bytes) -> None:
        with open(path, 'wb') as f:
            f.write(content)

    def recreate_directory(self, path: Path) -> Path:
        """
        Wipe directory if present, then create it empty

        Args:
            path: Directory path

        Returns:
            Directory path
        """
        path = Path(path)
        if path.is_dir():
            shutil.rmtree(path)
        elif path.exists():
            path.unlink()
        path.mkdir(parents=True)
        return path

    def ensure_directory(self, path: Path) -> Path:
        path = Path(path)
        path.mkdir(parents=True, exist_ok=True)
        return path

    def list_files(self, directory: Path, recursive: bool = True) -> List[Path]:
        """
        List regular files in directory

        Args:
            directory: Directory to scan
            recursive: Include subdirectories

        Returns:
            Sorted file paths

        Raises:
            FileNotFoundError: Directory does not exist
            NotADirectoryError: Path is not a directory
        """
        directory = Path(directory)
        # iterdir raises for a missing directory where rglob would yield nothing
        entries = list(directory.iterdir())
        if recursive:
            entries = list(directory.rglob('*'))
        return sorted(p for p in entries if p.is_file())

    async def read_text(self, path: Path) -> str:
        async with aiofiles.open(path, 'r', encoding='utf-8', errors='replace') as f:
            return await f.read()


def get_relative_name(directory: Path, file_path: Path) -> str:
    """
    Get display name of file relative to directory

    Args:
        directory: Base directory
        file_path: File path

    Returns:
        Relative path with forward slashes
    """
    try:
        rel_path = Path(file_path).relative_to(directory)
        return str(rel_path).replace(os.sep, '/')
    except ValueError:
        # File is outside directory
        return str(file_path)


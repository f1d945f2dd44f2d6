"""Backup and improved-dataset writers.

The source dataset is never written to. A verbatim backup is produced first,
then the improved dataset is written to its own path. Each artifact is written
to a temporary file in the target directory and moved into place, so a failed
write never leaves a truncated file behind.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path

from word_enrichment.exceptions import (
    BackupWriteError,
    DatasetPathError,
    DatasetWriteError,
)
from word_enrichment.models import WordsDataset

logger = logging.getLogger(__name__)


def _default_file_mode() -> int:
    """Mode a plain `open(path, "w")` would give a new file under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _atomic_write_bytes(path: Path, data: bytes) -> None:
    """Write `data` to `path` through a sibling temporary file.

    Raises:
        OSError: If the directory cannot be created or the write fails.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(tmp_name, _default_file_mode())
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


def serialize_dataset(dataset: WordsDataset) -> bytes:
    """Serialize a dataset as pretty-printed UTF-8 JSON (non-ASCII kept)."""
    return json.dumps(dataset.to_json_dict(), ensure_ascii=False, indent=2).encode(
        "utf-8"
    )


class DatasetWriter:
    """Write the backup copy and the improved dataset.

    Args:
        source_path: Source dataset; only used to reject colliding paths.
        output_path: Destination of the improved dataset.
        backup_path: Destination of the verbatim backup.
        timestamped_backup: If True, append `_YYYYmmdd_HHMMSS` to the backup
            file name so earlier backups are kept.

    Raises:
        DatasetPathError: If the output or backup path resolves to the source
            path, or output and backup resolve to the same file.
    """

    def __init__(
        self,
        source_path: str | Path,
        output_path: str | Path,
        backup_path: str | Path,
        *,
        timestamped_backup: bool = False,
    ) -> None:
        self.source_path = Path(source_path)
        self.output_path = Path(output_path)
        self.backup_path = Path(backup_path)
        self.timestamped_backup = timestamped_backup

        source = self.source_path.resolve()
        if self.output_path.resolve() == source:
            raise DatasetPathError(
                f"Output path {self.output_path} would overwrite the source dataset"
            )
        if self.backup_path.resolve() == source:
            raise DatasetPathError(
                f"Backup path {self.backup_path} would overwrite the source dataset"
            )
        if self.output_path.resolve() == self.backup_path.resolve():
            raise DatasetPathError(
                f"Output and backup paths must differ: {self.output_path}"
            )

    def resolve_backup_path(self, now: datetime | None = None) -> Path:
        if not self.timestamped_backup:
            return self.backup_path
        stamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
        return self.backup_path.with_name(
            f"{self.backup_path.stem}_{stamp}{self.backup_path.suffix}"
        )

    def write_backup(self, raw: bytes) -> Path:
        """Write a byte-for-byte copy of the source content.

        Args:
            raw: Source file content as read at batch start.

        Returns:
            Path of the backup file.

        Raises:
            BackupWriteError: If the backup cannot be written.
        """
        path = self.resolve_backup_path()
        try:
            _atomic_write_bytes(path, raw)
        except OSError as e:
            raise BackupWriteError(f"Failed to write backup {path}: {e}") from e
        logger.info(f"Backup created at: {path}")
        return path

    def write_dataset(self, dataset: WordsDataset) -> Path:
        """Serialize the improved dataset to the output path.

        Args:
            dataset: Complete improved dataset.

        Returns:
            Path of the written dataset.

        Raises:
            DatasetWriteError: If serialization or the write fails. An already
                written backup is left in place.
        """
        try:
            _atomic_write_bytes(self.output_path, serialize_dataset(dataset))
        except (OSError, TypeError, ValueError) as e:
            raise DatasetWriteError(
                f"Failed to write improved dataset {self.output_path}: {e}"
            ) from e
        logger.info(f"Improved words data saved to: {self.output_path}")
        return self.output_path

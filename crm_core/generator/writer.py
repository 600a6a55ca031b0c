"""
CRM Generator File Writer
Writes generated files only when their content changes
"""

import os
import tempfile
from collections import Counter
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable

import structlog

logger = structlog.get_logger()


class WriteStatus(str, Enum):
    CREATED = "created"
    WRITTEN = "written"
    SKIPPED = "skipped"


class SmartFileWriter:
    """Content-aware file writer

    Unchanged files are left untouched. With ``dry_run`` the status is
    computed but nothing is written.
    """

    def __init__(self, dry_run: bool = False):
        self.dry_run = dry_run

    def write(self, path: Path, content: str) -> WriteStatus:
        path = Path(path)

        if not path.exists():
            self._write(path, content)
            logger.info("File created", file=str(path), size=len(content), dry_run=self.dry_run)
            return WriteStatus.CREATED

        existing = path.read_text(encoding="utf-8")
        if existing == content:
            logger.debug("File unchanged", file=str(path))
            return WriteStatus.SKIPPED

        self._write(path, content)
        logger.info(
            "File updated",
            file=str(path),
            old_size=len(existing),
            new_size=len(content),
            dry_run=self.dry_run,
        )
        return WriteStatus.WRITTEN

    def _write(self, path: Path, content: str) -> None:
        if self.dry_run:
            return

        path.parent.mkdir(parents=True, exist_ok=True)

        # Write to a sibling temp file, then swap it in atomically
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    @staticmethod
    def statistics(statuses: Iterable[WriteStatus]) -> Dict[str, int]:
        """Count statuses, e.g. {"created": 2, "written": 0, "skipped": 50}"""
        counts = Counter(WriteStatus(status) for status in statuses)
        return {status.value: counts.get(status, 0) for status in WriteStatus}

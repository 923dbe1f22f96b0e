from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Callable, Optional

from werkzeug.datastructures import FileStorage

from campus_tour.errors import IntakeError


def _epoch_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class UploadIntake:
    """
    Local-disk intake for the single optional feedback image.

    Files land in `root` as `<epoch ms>-<original name>` and are referenced
    as `<url_prefix>/<stored name>`. No type or size checks, no cleanup.
    """

    root: Path
    url_prefix: str = "/uploads"
    clock: Callable[[], int] = _epoch_ms

    def stored_name(self, original: str) -> str:
        # only directory components are dropped; the name itself is kept as uploaded
        base = PurePosixPath(PureWindowsPath(original).name).name
        if base in ("", ".", ".."):
            base = "upload"
        return f"{self.clock()}-{base}"

    def save(self, upload: Optional[FileStorage]) -> Optional[str]:
        """Persist `upload` and return its URL path, or None when nothing was attached."""
        if upload is None or not upload.filename:
            return None
        name = self.stored_name(upload.filename)
        target = self.root / name
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            upload.save(target)
        except OSError as e:
            raise IntakeError(f"could not store upload {name}: {e}") from e
        return f"{self.url_prefix.rstrip('/')}/{name}"

    def path_for(self, url: str) -> Path:
        """Map a stored URL path back to its file on disk."""
        name = url.rsplit("/", 1)[-1]
        return self.root / name


def intake_from_config(config: dict) -> UploadIntake:
    # relative folders resolve against the working directory, as the server is started from the repo root
    folder = Path(config.get("UPLOAD_FOLDER") or "uploads")
    if not folder.is_absolute():
        folder = Path.cwd() / folder
    return UploadIntake(root=folder, url_prefix=config.get("UPLOAD_URL_PREFIX") or "/uploads")

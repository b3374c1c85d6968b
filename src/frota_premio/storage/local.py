from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Protocol

from werkzeug.utils import secure_filename

from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


class FileStorage(Protocol):
    def save(self, *, folder: str, filename: str, data: bytes) -> str:
        raise NotImplementedError

    def resolve(self, relative_path: str) -> Path:
        raise NotImplementedError


class LocalFileStorage(FileStorage):
    """Stores uploaded receipts and generated PDFs under UPLOAD_FOLDER.

    Paths handed back to callers are relative to the base directory, so the
    database never holds machine-specific locations.
    """

    def __init__(self, base_dir: str | Path):
        self._base_dir = Path(base_dir).resolve()

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def save(self, *, folder: str, filename: str, data: bytes) -> str:
        name = secure_filename(filename or "")
        if not name:
            raise ValidationError("Nome de arquivo inválido")

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f_")
        relative = Path(secure_filename(folder) or "misc") / f"{timestamp}{name}"
        target = self._base_dir / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
        logger.info("arquivo salvo em %s (%d bytes)", relative.as_posix(), len(data))
        return relative.as_posix()

    def resolve(self, relative_path: str) -> Path:
        target = (self._base_dir / relative_path).resolve()
        if self._base_dir not in target.parents:
            raise ValidationError("Arquivo inválido")
        if not target.is_file():
            raise ValidationError("Arquivo não encontrado")
        return target

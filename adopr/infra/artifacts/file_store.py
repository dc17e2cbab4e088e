import os
from pathlib import Path

from adopr.core.exceptions import ArtifactWriteError
from adopr.core.ports.artifact_store import ArtifactStore


class FileArtifactStore(ArtifactStore):
    """Diagnostic files such as raw build responses, one file per name."""

    def __init__(self, base_dir: str | Path) -> None:
        self._base_dir = Path(base_dir)

    def write(self, name: str, content: str) -> None:
        path = self._path_for(name)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w", encoding="utf-8") as handle:
                handle.write(content)
                handle.flush()
                os.fsync(handle.fileno())
            temp_path.replace(path)
        except OSError as error:
            raise ArtifactWriteError(f"Cannot write artifact: {error}", str(path)) from error

    def _path_for(self, name: str) -> Path:
        safe_name = name.replace("/", "_").replace("\\", "_")
        return self._base_dir / safe_name

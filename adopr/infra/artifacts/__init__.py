from adopr.infra.artifacts.file_store import FileArtifactStore

__all__ = ["FileArtifactStore"]

from typing import Protocol, runtime_checkable


@runtime_checkable
class ArtifactStore(Protocol):
    def write(self, name: str, content: str) -> None:
        ...

"""Resolution of classpath-style resource names to files under a root."""

from pathlib import Path

import structlog

from devjwt.core.errors import ResourceNotFound

logger = structlog.get_logger(__name__)


class ResourceLoader:
    """Reads named resources such as ``/privateKey.pem`` relative to a root."""

    def __init__(self, root: Path | str) -> None:
        self._root = Path(root).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def resolve(self, name: str) -> Path:
        """Map a resource name to a file path, or raise ResourceNotFound."""
        relative = name.lstrip("/")
        if not relative:
            raise ResourceNotFound(name)
        path = (self._root / relative).resolve()
        if not path.is_relative_to(self._root) or not path.is_file():
            raise ResourceNotFound(name)
        return path

    def exists(self, name: str) -> bool:
        try:
            self.resolve(name)
        except ResourceNotFound:
            return False
        return True

    def read(self, name: str) -> bytes:
        """Return the full contents of the named resource."""
        path = self.resolve(name)
        content = path.read_bytes()
        logger.debug("resource_read", resource=name, size=len(content))
        return content

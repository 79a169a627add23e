import os
import re
import uuid
from datetime import datetime, timezone
from fastapi import Request


class LocalFileStorage:
    """Filesystem blob store.

    Blobs live flat under ``root`` and are published under ``public_url``, so a
    stored filename maps 1:1 to its public URL.
    """

    def __init__(self, root: str, public_url: str):
        self.root = root
        self.public_url = public_url.rstrip("/")

    def _full_path(self, name: str) -> str:
        return os.path.join(self.root, os.path.basename(name))

    def store(self, data: bytes, original_name: str | None = None) -> str:
        os.makedirs(self.root, exist_ok=True)

        safe_name = os.path.basename(original_name or "file")
        safe_name = re.sub(r"[^A-Za-z0-9._-]", "_", safe_name) or "file"
        ts = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S%f")
        name = f"{ts}_{uuid.uuid4().hex[:8]}_{safe_name}"
        full_path = self._full_path(name)

        try:
            with open(full_path, "wb") as f:
                f.write(data)
        except Exception:
            if os.path.exists(full_path):
                os.remove(full_path)
            raise
        return name

    def read(self, name: str) -> bytes:
        with open(self._full_path(name), "rb") as f:
            return f.read()

    def delete(self, name: str) -> bool:
        try:
            os.remove(self._full_path(name))
        except FileNotFoundError:
            return False
        return True

    def url_for(self, name: str) -> str:
        return f"{self.public_url}/{name}"

    def name_from_url(self, url: str) -> str:
        return os.path.basename(url)


def get_storage(request: Request) -> LocalFileStorage:
    storage: LocalFileStorage | None = getattr(request.app.state, "storage", None)
    if storage is None:
        raise RuntimeError("File storage is not initialised")
    return storage

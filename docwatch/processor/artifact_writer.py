from docwatch.logging.logger import Log
from docwatch.storage.base import BaseStorage
from docwatch.storage.models import TEXT_MIME_TYPE, Folder


class ArtifactWriter:
    """Saves extracted text as ``<name>.txt`` in the output folder."""

    SUFFIX = ".txt"

    def __init__(self, storage: BaseStorage) -> None:
        self._storage = storage

    def write(self, name: str, text: str, folder: Folder) -> str:
        """Create the text artifact and return its link; "" when text is empty."""
        if not text:
            return ""
        artifact_id = self._storage.create_file(
            folder.id,
            f"{name}{self.SUFFIX}",
            text.encode("utf-8"),
            TEXT_MIME_TYPE,
        )
        link = self._storage.file_link(artifact_id)
        Log.info(f"Created {name}{self.SUFFIX} in folder {folder.name}: {link}")
        return link

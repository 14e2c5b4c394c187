from abc import ABC, abstractmethod


class PropertyKeys:
    """Names of the properties a run reads and writes."""

    INPUT_FOLDER_ID = "InputFolderId"
    OUTPUT_FOLDER_NAME = "OutputFolderName"
    RUN_MODE = "RunMode"
    KNOWN_FILE_IDS = "knownFileIDs"


class BasePropertyStore(ABC):
    """Durable string key-value store holding run configuration and state."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent or empty."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value.

        Raises:
            PropertyStoreError: if the value cannot be persisted.
        """

import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

NOT_AVAILABLE = "N/A"

ExtractionResult = dict[str, str]


@dataclass(frozen=True)
class ProcessedSet:
    """Ids of documents already ingested, in the order they were committed.

    Values are immutable: ``union`` returns a new set and leaves this one
    untouched, so a run can never leak partial progress into its input.
    """

    ids: tuple[str, ...] = ()
    _members: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_members", frozenset(self.ids))

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._members

    def __len__(self) -> int:
        return len(self.ids)

    def __iter__(self) -> Iterator[str]:
        return iter(self.ids)

    def union(self, new_ids: Iterable[str]) -> "ProcessedSet":
        merged = list(self.ids)
        seen = set(merged)
        for document_id in new_ids:
            if document_id not in seen:
                merged.append(document_id)
                seen.add(document_id)
        return ProcessedSet(tuple(merged))

    @classmethod
    def from_json(cls, raw: str | None) -> "ProcessedSet":
        """Parse the persisted JSON array. Absent or empty means nothing processed.

        Raises:
            ValueError: if the value is not a JSON array.
        """
        if not raw:
            return cls()
        data = json.loads(raw)
        if not isinstance(data, list):
            raise ValueError("knownFileIDs must be a JSON array")
        return cls().union(str(item) for item in data)

    def to_json(self) -> str:
        return json.dumps(list(self.ids))


@dataclass(frozen=True)
class LogRow:
    """One Extraction Log row, in header order."""

    HEADER = (
        "File Name",
        "Original PDF link",
        "Text file link",
        "Extracted text",
        "Sum",
        "Num",
        "Date",
    )

    file_name: str
    original_link: str
    artifact_link: str
    text: str
    sum: str
    num: str
    date: str

    def as_cells(self) -> list[str]:
        return [
            self.file_name,
            self.original_link,
            self.artifact_link,
            self.text,
            self.sum,
            self.num,
            self.date,
        ]


@dataclass
class RunReport:
    """Outcome of one coordinator pass."""

    processed_set: ProcessedSet
    succeeded: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

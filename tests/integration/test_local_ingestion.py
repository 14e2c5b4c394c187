import csv
import json
from pathlib import Path

import pytest

from docwatch.config.settings import Settings
from docwatch.main import build_runner
from docwatch.processor.models import LogRow

INVOICE_TEXT = (
    "חשבונית מס/קבלה מספר 7890\n"
    "תאריך 29/02/2020\n"
    'סה"כ לתשלום: 123.45\n'
)


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    (tmp_path / "data" / "inbox").mkdir(parents=True)
    return Settings(
        storage_backend="local",
        local_storage_root=str(tmp_path / "data"),
        properties_file=str(tmp_path / "state" / "properties.json"),
        input_folder_id="inbox",
        output_folder_name="processed",
        run_mode="",
        pdf_engine="pdfplumber",
    )


@pytest.fixture()
def inbox(settings: Settings) -> Path:
    return Path(settings.local_storage_root) / "inbox"


def _known_ids(settings: Settings) -> list[str]:
    path = Path(settings.properties_file)
    if not path.exists():
        return []
    return json.loads(json.loads(path.read_text(encoding="utf-8"))["knownFileIDs"])


def _log_rows(settings: Settings) -> list[list[str]]:
    path = Path(settings.local_storage_root) / "inbox/processed/Extraction Log.csv"
    with path.open(newline="", encoding="utf-8") as fh:
        rows = list(csv.reader(fh))
    assert rows[0] == list(LogRow.HEADER)
    return rows[1:]


class TestFirstRun:
    def test_processes_text_and_pdf_documents(
        self, settings: Settings, inbox: Path, sample_pdf_bytes: bytes
    ) -> None:
        (inbox / "a.txt").write_text(INVOICE_TEXT, encoding="utf-8")
        (inbox / "b.pdf").write_bytes(sample_pdf_bytes)

        report = build_runner(settings).run_once()

        assert report is not None
        assert _known_ids(settings) == ["inbox/a.txt", "inbox/b.pdf"]
        rows = _log_rows(settings)
        assert [row[0] for row in rows] == ["a.txt", "b.pdf"]
        assert rows[0][4:] == ["123.45", "7890", "29/02/2020"]
        assert rows[1][4:] == ["N/A", "N/A", "29/02/2020"]
        assert (inbox / "processed" / "a.txt.txt").read_text(encoding="utf-8") == INVOICE_TEXT
        assert (inbox / "processed" / "b.pdf.txt").exists()
        assert rows[0][1] == (inbox / "a.txt").resolve().as_uri()
        assert rows[0][2] == (inbox / "processed" / "a.txt.txt").resolve().as_uri()

    def test_pdf_source_is_kept_and_temp_copy_removed(
        self, settings: Settings, inbox: Path, sample_pdf_bytes: bytes
    ) -> None:
        (inbox / "b.pdf").write_bytes(sample_pdf_bytes)

        build_runner(settings).run_once()

        assert (inbox / "b.pdf").exists()
        tmp_dir = Path(settings.local_storage_root) / ".docwatch-tmp"
        assert list(tmp_dir.iterdir()) == []

    def test_empty_document_is_skipped_and_not_marked_known(
        self, settings: Settings, inbox: Path
    ) -> None:
        (inbox / "empty.txt").write_bytes(b"")
        (inbox / "a.txt").write_text(INVOICE_TEXT, encoding="utf-8")

        report = build_runner(settings).run_once()

        assert report is not None
        assert report.skipped == ["inbox/empty.txt"]
        assert _known_ids(settings) == ["inbox/a.txt"]
        assert [row[0] for row in _log_rows(settings)] == ["a.txt"]
        assert not (inbox / "processed" / "empty.txt.txt").exists()


class TestRepeatedRuns:
    def test_rerun_without_new_documents_changes_nothing(self, settings: Settings, inbox: Path) -> None:
        (inbox / "a.txt").write_text(INVOICE_TEXT, encoding="utf-8")
        build_runner(settings).run_once()
        known_before = _known_ids(settings)

        build_runner(settings).run_once()

        assert _known_ids(settings) == known_before
        assert len(_log_rows(settings)) == 1

    def test_only_new_documents_are_appended(self, settings: Settings, inbox: Path) -> None:
        (inbox / "a.txt").write_text(INVOICE_TEXT, encoding="utf-8")
        build_runner(settings).run_once()
        (inbox / "c.txt").write_text("לתשלום: 5", encoding="utf-8")

        build_runner(settings).run_once()

        assert _known_ids(settings) == ["inbox/a.txt", "inbox/c.txt"]
        assert [row[0] for row in _log_rows(settings)] == ["a.txt", "c.txt"]

    def test_output_folder_is_reused(self, settings: Settings, inbox: Path) -> None:
        build_runner(settings).run_once()
        build_runner(settings).run_once()

        assert [p.name for p in inbox.iterdir() if p.is_dir()] == ["processed"]


class TestFaultIsolation:
    def test_broken_document_is_retried_later(self, settings: Settings, inbox: Path) -> None:
        (inbox / "1.txt").write_text("לתשלום: 1", encoding="utf-8")
        (inbox / "2.pdf").write_bytes(b"this is not a pdf")
        (inbox / "3.txt").write_text("לתשלום: 3", encoding="utf-8")

        report = build_runner(settings).run_once()

        assert report is not None
        assert report.failed == ["inbox/2.pdf"]
        assert _known_ids(settings) == ["inbox/1.txt", "inbox/3.txt"]
        assert [row[0] for row in _log_rows(settings)] == ["1.txt", "3.txt"]


class TestRunModes:
    def test_test_mode_writes_outputs_but_not_state(self, settings: Settings, inbox: Path) -> None:
        settings.run_mode = "test"
        (inbox / "a.txt").write_text(INVOICE_TEXT, encoding="utf-8")

        build_runner(settings).run_once()
        build_runner(settings).run_once()

        assert _known_ids(settings) == []
        assert [row[0] for row in _log_rows(settings)] == ["a.txt", "a.txt"]

    def test_missing_configuration_touches_nothing(self, settings: Settings, inbox: Path) -> None:
        settings.output_folder_name = ""
        (inbox / "a.txt").write_text(INVOICE_TEXT, encoding="utf-8")

        assert build_runner(settings).run_once() is None

        assert not (inbox / "processed").exists()
        assert not Path(settings.properties_file).exists()

"""
Tests for lead export.
"""
import pandas as pd

from gobh_site.export import contact_submissions_frame, main, save_frame, status_checks_frame
from gobh_site.models import CONTACT_COLLECTION, STATUS_COLLECTION, ContactSubmission, StatusCheck


def _lead(name, submitted_at):
    return ContactSubmission(
        name=name, email=f"{name}@example.com", phone="555", address="1 Main St",
        submittedAt=submitted_at,
    ).model_dump()


def test_contact_frame_newest_first(store):
    store.insert_one(CONTACT_COLLECTION, _lead("old", "2024-01-01T00:00:00+00:00"))
    store.insert_one(CONTACT_COLLECTION, _lead("new", "2024-05-01T00:00:00+00:00"))

    df = contact_submissions_frame(store)

    assert list(df["name"]) == ["new", "old"]
    assert "_id" not in df.columns


def test_contact_frame_since(store):
    store.insert_one(CONTACT_COLLECTION, _lead("old", "2024-01-01T00:00:00+00:00"))
    store.insert_one(CONTACT_COLLECTION, _lead("new", "2024-05-01T00:00:00+00:00"))

    df = contact_submissions_frame(store, since="2024-03-01")

    assert list(df["name"]) == ["new"]


def test_empty_frames_have_columns(store):
    assert "email" in contact_submissions_frame(store).columns
    assert "client_name" in status_checks_frame(store).columns


def test_save_frame_csv(store, tmp_path):
    store.insert_one(STATUS_COLLECTION, StatusCheck(client_name="nightly-check").model_dump())
    out = tmp_path / "status.csv"

    save_frame(status_checks_frame(store), str(out))

    df = pd.read_csv(out)
    assert list(df["client_name"]) == ["nightly-check"]


def test_main_exports_leads(tmp_path):
    from gobh_site.database import DocumentStore

    db_path = tmp_path / "leads.db"
    with DocumentStore(str(db_path)) as store:
        store.insert_one(CONTACT_COLLECTION, _lead("jane", "2024-01-01T00:00:00+00:00"))
    out = tmp_path / "leads.csv"

    assert main(["--db", str(db_path), "--out", str(out)]) == 0
    assert list(pd.read_csv(out)["name"]) == ["jane"]


def test_main_missing_db(tmp_path):
    assert main(["--db", str(tmp_path / "missing.db"), "--out", str(tmp_path / "x.csv")]) == 1


def test_main_writes_log_file(tmp_path, monkeypatch):
    import logging

    logger = logging.getLogger("gobh_site.export")
    monkeypatch.setattr(logger, "handlers", [])
    log_path = tmp_path / "export.log"

    assert main(["--db", str(tmp_path / "missing.db"), "--log-file-path", str(log_path)]) == 1

    for handler in logger.handlers:
        handler.close()
    assert "Database file not found" in log_path.read_text(encoding="utf-8")

"""Tests for the saved-jobs collection."""

import json
from unittest.mock import patch

import pytest

from job_planner.exceptions import CatalogLoadError, SinkWriteError
from job_planner.storage.saved_jobs import SavedJobs


class TestSavedJobsCollection:
    """Test in-memory operations."""

    def test_starts_empty(self, tmp_path):
        saved = SavedJobs(path=tmp_path / "saved.json")
        assert saved.count() == 0
        assert saved.jobs() == []
        assert saved.last_saved() is None

    def test_add_and_remove(self, sample_jobs):
        saved = SavedJobs()
        saved.add(sample_jobs[0])
        saved.add(sample_jobs[2])
        assert [j.id for j in saved.jobs()] == ["1", "3"]

        saved.remove(sample_jobs[0])
        assert [j.id for j in saved.jobs()] == ["3"]

    def test_add_duplicate_ignored(self, sample_jobs):
        saved = SavedJobs()
        saved.add(sample_jobs[0])
        saved.add(sample_jobs[0])
        assert saved.count() == 1

    def test_remove_unsaved_is_noop(self, sample_jobs):
        saved = SavedJobs([sample_jobs[0]])
        saved.remove(sample_jobs[1])
        assert saved.count() == 1

    def test_set_jobs_replaces(self, sample_jobs):
        saved = SavedJobs([sample_jobs[0]])
        saved.set_jobs(sample_jobs[1:3])
        assert [j.id for j in saved.jobs()] == ["2", "3"]

    def test_jobs_returns_copy(self, sample_jobs):
        saved = SavedJobs(sample_jobs)
        saved.jobs().clear()
        assert saved.count() == 4

    def test_clear(self, sample_jobs):
        saved = SavedJobs(sample_jobs)
        saved.clear()
        assert saved.count() == 0


class TestSavedJobsPersistence:
    """Test load and save."""

    def test_missing_file_loads_empty(self, tmp_path):
        path = tmp_path / "savedJobs.json"
        saved = SavedJobs.load_from_json(path)
        assert saved.count() == 0
        assert saved.path == path

    def test_save_and_reload(self, tmp_path, sample_jobs):
        path = tmp_path / "data" / "savedJobs.json"
        saved = SavedJobs(sample_jobs[:2], path=path)

        written = saved.save()

        assert written == path
        assert saved.last_saved() is not None
        assert len(json.loads(path.read_text(encoding="utf-8"))) == 2
        assert SavedJobs.load_from_json(path).jobs() == sample_jobs[:2]

    def test_save_to_other_path(self, tmp_path, sample_jobs):
        saved = SavedJobs(sample_jobs[:1], path=tmp_path / "a.json")
        saved.save(tmp_path / "b.json")
        assert (tmp_path / "b.json").exists()
        assert not (tmp_path / "a.json").exists()

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "savedJobs.json"
        path.write_text("not json", encoding="utf-8")
        with pytest.raises(CatalogLoadError):
            SavedJobs.load_from_json(path)

    def test_save_failure(self, tmp_path, sample_jobs):
        saved = SavedJobs(sample_jobs, path=tmp_path / "savedJobs.json")
        with patch(
            "job_planner.storage.saved_jobs.tempfile.NamedTemporaryFile",
            side_effect=PermissionError("denied"),
        ):
            with pytest.raises(SinkWriteError, match="denied"):
                saved.save()
        assert saved.last_saved() is None

    def test_failed_write_keeps_previous_file(self, tmp_path, sample_jobs):
        path = tmp_path / "savedJobs.json"
        SavedJobs(sample_jobs[:2], path=path).save()
        before = path.read_bytes()

        saved = SavedJobs(sample_jobs, path=path)
        with patch(
            "job_planner.storage.saved_jobs.write_records",
            side_effect=SinkWriteError("No space left on device"),
        ):
            with pytest.raises(SinkWriteError, match="No space left"):
                saved.save()

        assert path.read_bytes() == before
        assert [p.name for p in tmp_path.iterdir()] == ["savedJobs.json"]
        assert SavedJobs.load_from_json(path).count() == 2

    def test_save_replaces_existing_file(self, tmp_path, sample_jobs):
        path = tmp_path / "savedJobs.json"
        SavedJobs(sample_jobs, path=path).save()
        SavedJobs(sample_jobs[:1], path=path).save()
        assert SavedJobs.load_from_json(path).count() == 1
        assert [p.name for p in tmp_path.iterdir()] == ["savedJobs.json"]

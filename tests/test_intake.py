import io

import pytest
from werkzeug.datastructures import FileStorage

from campus_tour.errors import IntakeError
from campus_tour.services.intake import UploadIntake, intake_from_config


def _upload(data=b"hello", filename="tour.png"):
    return FileStorage(stream=io.BytesIO(data), filename=filename, name="image")


def test_save_prefixes_timestamp_and_returns_url(tmp_path):
    intake = UploadIntake(root=tmp_path / "up", clock=lambda: 1717000000123)
    url = intake.save(_upload(b"\x00\x01bytes"))
    assert url == "/uploads/1717000000123-tour.png"
    assert (tmp_path / "up" / "1717000000123-tour.png").read_bytes() == b"\x00\x01bytes"
    assert intake.path_for(url) == tmp_path / "up" / "1717000000123-tour.png"


def test_save_without_file_returns_none(tmp_path):
    intake = UploadIntake(root=tmp_path)
    assert intake.save(None) is None
    assert intake.save(_upload(filename="")) is None
    assert list(tmp_path.iterdir()) == []


def test_directory_components_are_dropped_from_name(tmp_path):
    intake = UploadIntake(root=tmp_path, clock=lambda: 5)
    assert intake.save(_upload(filename="../../etc/passwd")) == "/uploads/5-passwd"
    assert intake.stored_name("C:\\Users\\ana\\tour.png") == "5-tour.png"
    assert [p.name for p in tmp_path.iterdir()] == ["5-passwd"]


@pytest.mark.parametrize("name", ["", ".", ".."])
def test_empty_or_dot_names_fall_back(tmp_path, name):
    assert UploadIntake(root=tmp_path, clock=lambda: 5).stored_name(name) == "5-upload"


@pytest.mark.parametrize("name", ["campus map.png", "图书馆.png", "Café (1).JPG"])
def test_original_name_is_kept_verbatim(tmp_path, name):
    intake = UploadIntake(root=tmp_path, clock=lambda: 42)
    url = intake.save(_upload(b"img", filename=name))
    assert url == f"/uploads/42-{name}"
    assert intake.path_for(url).read_bytes() == b"img"


def test_write_failure_raises_intake_error(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x")
    intake = UploadIntake(root=blocker / "sub")
    with pytest.raises(IntakeError):
        intake.save(_upload())


def test_intake_from_config_resolves_relative_folder(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    intake = intake_from_config({"UPLOAD_FOLDER": "uploads", "UPLOAD_URL_PREFIX": "/uploads"})
    assert intake.root == tmp_path / "uploads"
    assert intake.url_prefix == "/uploads"

import sys
from pathlib import Path

import platformdirs

from smitto import paths


def test_tmp_path_on_linux(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    assert paths.tmp_path() == "/tmp/"


def test_tmp_path_on_windows(monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")
    assert paths.tmp_path() == "C:/tmp/"


def test_app_objects_path_created(tmp_path):
    result = paths.app_objects_path(tmp_path)
    assert Path(result) == tmp_path / "Objects"
    assert Path(result).is_dir()


def test_app_objects_path_is_idempotent(tmp_path):
    first = paths.app_objects_path(str(tmp_path))
    second = paths.app_objects_path(str(tmp_path))
    assert first == second
    assert Path(second).is_dir()


def test_app_data_path_created(monkeypatch, tmp_path):
    def fake_user_data_dir(appname=None, *args, **kwargs):
        return str(tmp_path / "data" / appname)

    monkeypatch.setattr(platformdirs, "user_data_dir", fake_user_data_dir)
    result = paths.app_data_path("demoapp")
    assert Path(result) == tmp_path / "data" / "demoapp"
    assert Path(result).is_dir()
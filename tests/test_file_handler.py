import json

import pytest

from eonetmap.file_handler import FileHandler, FileHandlerError


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    cwd = tmp_path / "cwd"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return tmp_path


@pytest.fixture
def data_dir(workdir):
    path = workdir / "data"
    path.mkdir()
    return path


def test_data_is_stored():
    fh = FileHandler()
    fh.data = {"a": 1, "b": 2}
    assert fh.data == {"a": 1, "b": 2}


def test_paths_follow_working_directory(workdir):
    fh = FileHandler()
    assert fh.parent_path().resolve() == workdir.resolve()
    assert fh.data_path().resolve() == (workdir / "data").resolve()


def test_read_raises_when_data_directory_missing(workdir):
    fh = FileHandler()
    with pytest.raises(FileHandlerError, match="data directory does not exist"):
        fh.read_from_json("any.json")


def test_read_raises_when_file_cannot_be_opened(data_dir):
    fh = FileHandler()
    with pytest.raises(FileHandlerError, match="cannot open file"):
        fh.read_from_json("nofile.json")


def test_read_raises_on_invalid_json(data_dir):
    (data_dir / "bad.json").write_text("not valid json")
    fh = FileHandler()
    with pytest.raises(FileHandlerError, match="JSON parsing error"):
        fh.read_from_json("bad.json")


def test_read_sets_data(data_dir):
    (data_dir / "good.json").write_text(json.dumps({"key": "value"}))
    fh = FileHandler()
    assert fh.read_from_json("good.json") == {"key": "value"}
    assert fh.data == {"key": "value"}


def test_create_events_on_valid_format():
    fh = FileHandler([None, [{"id": "e1"}, {"id": "e2"}]])
    events = fh.create_events()
    assert [e.id for e in events] == ["e1", "e2"]


def test_create_events_raises_on_invalid_format():
    fh = FileHandler({})
    with pytest.raises(
        FileHandlerError, match="invalid JSON file format for creating Events"
    ):
        fh.create_events()


def test_create_recent_events_uses_last_geometry_date():
    fh = FileHandler(
        {
            "events": [
                {
                    "id": "e1",
                    "geometry": [
                        {"date": "d1", "type": "T", "coordinates": [1.0, 2.0]},
                        {"date": "d2", "type": "T", "coordinates": [3.0, 4.0]},
                    ],
                },
                {"id": "e2"},
            ]
        }
    )
    recents = fh.create_recent_events()
    assert len(recents) == 2
    assert len(recents[0].geometry) == 2
    assert recents[0].geometry[0].date == "d2"
    assert recents[1].geometry == []


def test_create_recent_events_leaves_stored_data_unchanged():
    stored = {
        "events": [
            {
                "id": "e1",
                "geometry": [
                    {"date": "d1", "coordinates": [1.0, 2.0]},
                    {"date": "d2", "coordinates": [3.0, 4.0]},
                ],
            }
        ]
    }
    fh = FileHandler(stored)
    fh.create_recent_events()
    assert fh.data["events"][0]["geometry"][0]["date"] == "d1"


def test_create_recent_events_raises_on_invalid_format():
    fh = FileHandler([])
    with pytest.raises(
        FileHandlerError, match="invalid JSON file format for creating Events"
    ):
        fh.create_recent_events()


def test_create_categories():
    fh = FileHandler([[{"id": "c1", "title": "T1"}, {"id": "c2", "title": "T2"}]])
    cats = fh.create_categories()
    assert [(c.id, c.title) for c in cats] == [("c1", "T1"), ("c2", "T2")]


def test_create_categories_raises_on_empty_data():
    fh = FileHandler([])
    with pytest.raises(FileHandlerError):
        fh.create_categories()


def test_write_to_json_writes_values(workdir):
    fh = FileHandler({"a": 1, "b": 2})
    written = fh.write_to_json("out.json")
    outpath = workdir / "data" / "out.json"
    assert written.resolve() == outpath.resolve()
    assert json.loads(outpath.read_text()) == [1, 2]


def test_write_then_read_round_trip(workdir):
    fh = FileHandler([[{"id": "c1"}], {"x": 1}])
    fh.write_to_json("round.json")
    other = FileHandler()
    assert other.read_from_json("round.json") == [[{"id": "c1"}], {"x": 1}]


def test_categories_exist_true_when_file_present(data_dir):
    (data_dir / "categories.json").write_text("[]")
    assert FileHandler().categories_exist() is True


def test_categories_exist_false_when_file_absent(data_dir):
    assert FileHandler().categories_exist() is False


def test_clear_data_dir_removes_only_files(data_dir):
    (data_dir / "categories.json").write_text("[]")
    (data_dir / "b.json").write_text("{}")
    (data_dir / "sub").mkdir()
    fh = FileHandler()
    assert fh.categories_exist() is True
    fh.clear_data_dir()
    assert fh.categories_exist() is False
    assert sorted(p.name for p in fh.data_path().iterdir()) == ["sub"]


def test_clear_data_dir_raises_when_missing(workdir):
    with pytest.raises(FileHandlerError, match="Folder does not exist"):
        FileHandler().clear_data_dir()


def test_create_folder_creates_data_directory(workdir):
    path = FileHandler().create_folder()
    assert path.is_dir()
    assert path.resolve() == (workdir / "data").resolve()
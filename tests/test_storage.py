from todoc.storage import DEFAULT_PATH, Storage


def test_default_path():
    assert str(Storage().path) == DEFAULT_PATH


def test_load_missing_file_creates_it(tmp_path, capsys):
    path = tmp_path / "store.txt"
    storage = Storage(path)
    storage.load()
    assert path.exists()
    assert storage.lines == []
    assert capsys.readouterr().out == "Can't load the storage, so we're creating a new one\n"


def test_load_strips_newlines(tmp_path):
    path = tmp_path / "store.txt"
    path.write_bytes(b"first\nsecond\nlast")
    storage = Storage(path)
    storage.load()
    assert storage.lines == ["first", "second", "last"]


def test_load_keeps_empty_lines(tmp_path):
    path = tmp_path / "store.txt"
    path.write_bytes(b"a\n\nb\n")
    storage = Storage(path)
    storage.load()
    assert storage.lines == ["a", "", "b"]


def test_write_and_reload_round_trip(tmp_path):
    path = tmp_path / "store.txt"
    storage = Storage(path)
    storage.rewrite(["one", "two\tthree"])
    storage.write()
    assert path.read_bytes() == b"one\ntwo\tthree\n"
    again = Storage(path)
    again.load()
    assert again.lines == ["one", "two\tthree"]


def test_rewrite_replaces_lines(tmp_path):
    storage = Storage(tmp_path / "store.txt")
    storage.rewrite(["x"])
    storage.rewrite(iter(["y", "z"]))
    assert storage.lines == ["y", "z"]


def test_write_failure_reports(tmp_path, capsys):
    storage = Storage(tmp_path)
    storage.rewrite(["line"])
    storage.write()
    assert capsys.readouterr().out == "Error: Could not open file for writing\n"
from pathlib import Path

import pytest

from demoapps.explorer import FileExplorer


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    (tmp_path / "alpha").mkdir()
    (tmp_path / "alpha" / "inner.txt").write_text("x")
    (tmp_path / "beta").mkdir()
    (tmp_path / "notes.txt").write_text("hello")
    return tmp_path


def test_lists_entries_of_start_directory(tree: Path) -> None:
    explorer = FileExplorer(tree)
    assert set(explorer.path_names) == {tree / "alpha", tree / "beta", tree / "notes.txt"}
    assert explorer.err is None


def test_current_is_absolute_path_text(tree: Path) -> None:
    explorer = FileExplorer(tree)
    assert explorer.current() == str(tree)
    assert Path(explorer.current()).is_absolute()


def test_enter_dir_and_go_up_round_trip(tree: Path) -> None:
    explorer = FileExplorer(tree)
    index = explorer.path_names.index(tree / "alpha")
    explorer.enter_dir(index)
    assert explorer.current_path == tree / "alpha"
    assert explorer.path_names == [tree / "alpha" / "inner.txt"]
    explorer.go_up()
    assert explorer.current_path == tree
    assert len(explorer.path_names) == 3


def test_entering_a_file_records_error_and_keeps_listing(tree: Path) -> None:
    explorer = FileExplorer(tree)
    before = list(explorer.path_names)
    explorer.enter_dir(explorer.path_names.index(tree / "notes.txt"))
    assert explorer.err is not None and explorer.err.startswith("An error occurred: ")
    assert explorer.path_names == before
    assert explorer.current_path == tree / "notes.txt"


def test_clear_err_resets_error(tree: Path) -> None:
    explorer = FileExplorer(tree / "missing")
    assert explorer.err is not None and explorer.err.startswith("An error occurred: ")
    explorer.clear_err()
    assert explorer.err is None


def test_successful_reload_clears_previous_error(tree: Path) -> None:
    explorer = FileExplorer(tree / "missing")
    explorer.go_up()
    assert explorer.err is None
    assert explorer.current_path == tree


def test_go_up_at_root_records_error() -> None:
    root = Path(Path.cwd().anchor)
    explorer = FileExplorer(root)
    explorer.go_up()
    assert explorer.err == "Cannot go up from the root directory"
    assert explorer.current_path == root


def test_enter_dir_out_of_range_raises(tree: Path) -> None:
    explorer = FileExplorer(tree)
    with pytest.raises(IndexError):
        explorer.enter_dir(len(explorer.path_names))
    with pytest.raises(IndexError):
        explorer.enter_dir(-1)


def test_default_start_is_working_directory(tree: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tree / "beta")
    explorer = FileExplorer()
    assert explorer.current_path == tree / "beta"
    assert explorer.path_names == []
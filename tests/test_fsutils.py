import os

import pytest

from xvtools.fsutils import (
    DIRSIZ,
    find,
    fmtname,
    ls,
    main_find,
    main_ln,
    main_ls,
    main_mkdir,
    main_rm,
)


def test_fmtname_pads_short_names():
    result = fmtname("a/b/hello")
    assert len(result) == DIRSIZ
    assert result.rstrip() == "hello"


def test_fmtname_keeps_long_names():
    name = "averyveryverylongname"
    assert fmtname("dir/" + name) == name


def test_fmtname_without_slash():
    assert fmtname("plain").rstrip() == "plain"


def test_ls_file(tmp_path):
    content = b"hello"
    path = tmp_path / "f.txt"
    path.write_bytes(content)
    lines = list(ls(str(path)))
    assert len(lines) == 1
    name, ftype, ino, size = lines[0].split()
    assert name == "f.txt"
    assert ftype == "2"
    assert int(ino) == os.stat(path).st_ino % (1 << 31)
    assert size == str(len(content))


def test_ls_directory(tmp_path):
    (tmp_path / "a").write_bytes(b"x")
    (tmp_path / "sub").mkdir()
    lines = list(ls(str(tmp_path)))
    by_name = {line.split()[0]: line.split() for line in lines}
    assert {".", "..", "a", "sub"} == set(by_name)
    assert by_name["sub"][1] == "1"
    assert by_name["a"][1] == "2"


def test_ls_missing_path(tmp_path):
    with pytest.raises(OSError):
        list(ls(str(tmp_path / "missing")))


def test_ls_path_too_long(tmp_path):
    long_path = str(tmp_path) + "/." * 300
    with pytest.raises(ValueError):
        list(ls(long_path))


def test_main_ls_reports_missing(tmp_path, capsys):
    missing = str(tmp_path / "missing")
    assert main_ls([missing]) == 0
    assert capsys.readouterr().err == f"ls: cannot open {missing}\n"


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "target").write_text("1")
    (tmp_path / "b" / "c").mkdir(parents=True)
    (tmp_path / "b" / "c" / "target").write_text("2")
    (tmp_path / "target").mkdir()
    (tmp_path / "target" / "target").write_text("3")
    (tmp_path / "other").write_text("4")
    return tmp_path


def test_find_matches_files_only(tree):
    root = str(tree)
    found = sorted(find(root, "target"))
    assert found == sorted(
        [f"{root}/a/target", f"{root}/b/c/target", f"{root}/target/target"]
    )


def test_find_nothing(tree):
    assert list(find(str(tree), "absent")) == []


def test_find_missing_directory(tmp_path, capsys):
    missing = str(tmp_path / "missing")
    assert list(find(missing, "x")) == []
    assert capsys.readouterr().err == f"find: cannot open {missing}\n"


def test_main_find_wrong_arguments(capsys):
    assert main_find(["only-one"]) == 0
    assert capsys.readouterr().err == "Error: Please specify directory and file names.\n"


def test_main_find_prints_paths(tree, capsys):
    assert main_find([str(tree), "other"]) == 0
    assert capsys.readouterr().out == f"{tree}/other\n"


def test_main_mkdir_and_rm(tmp_path):
    d1 = str(tmp_path / "d1")
    d2 = str(tmp_path / "d2")
    assert main_mkdir([d1, d2]) == 0
    assert os.path.isdir(d1) and os.path.isdir(d2)
    assert main_rm([d1, d2]) == 0
    assert not os.path.exists(d1) and not os.path.exists(d2)


def test_main_mkdir_stops_at_failure(tmp_path, capsys):
    existing = tmp_path / "e"
    existing.mkdir()
    later = tmp_path / "later"
    assert main_mkdir([str(existing), str(later)]) == 0
    assert capsys.readouterr().err == f"mkdir: {existing} failed to create\n"
    assert not later.exists()


def test_main_mkdir_usage(capsys):
    assert main_mkdir([]) == 1
    assert capsys.readouterr().err == "Usage: mkdir files...\n"


def test_main_rm_refuses_nonempty_directory(tmp_path, capsys):
    d = tmp_path / "full"
    d.mkdir()
    (d / "x").write_text("x")
    assert main_rm([str(d)]) == 0
    assert capsys.readouterr().err == f"rm: {d} failed to delete\n"
    assert d.exists()


def test_main_rm_usage(capsys):
    assert main_rm([]) == 1
    assert capsys.readouterr().err == "Usage: rm files...\n"


def test_main_ln_links(tmp_path):
    old = tmp_path / "old"
    old.write_text("data")
    new = tmp_path / "new"
    assert main_ln([str(old), str(new)]) == 0
    assert new.read_text() == "data"
    assert os.stat(old).st_ino == os.stat(new).st_ino


def test_main_ln_failure(tmp_path, capsys):
    old = str(tmp_path / "nope")
    new = str(tmp_path / "new")
    assert main_ln([old, new]) == 0
    assert capsys.readouterr().err == f"link {old} {new}: failed\n"


def test_main_ln_usage(capsys):
    assert main_ln(["one"]) == 1
    assert capsys.readouterr().err == "Usage: ln old new\n"
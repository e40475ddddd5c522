import pytest

from labkit.archive import (
    ArchiveError,
    create_archive,
    extract_archive,
    list_archive,
    main,
)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _make(workdir, files):
    for name, data in files.items():
        (workdir / name).write_bytes(data)


def test_exact_layout_single_file(workdir):
    _make(workdir, {"a.txt": b"hi"})
    create_archive("out.arc", ["a.txt"])
    expected = (
        b"arcfile\0"
        + b"\x01\x00\x00\x00"
        + b"\x06\x00\x00\x00"
        + b"\x00" * 4
        + b"\x02" + b"\x00" * 7
        + b"a.txt\0"
        + b"hi"
    )
    assert (workdir / "out.arc").read_bytes() == expected
    assert list_archive("out.arc") == ["a.txt"]


def test_header_records_entry_count(workdir):
    _make(workdir, {"a": b"1", "b": b"22", "c": b"333"})
    create_archive("out.arc", ["a", "b", "c"])
    raw = (workdir / "out.arc").read_bytes()
    assert raw[:8] == b"arcfile\0"
    assert int.from_bytes(raw[8:12], "little") == 3
    assert list_archive("out.arc") == ["a", "b", "c"]


def test_list_returns_names_in_order(workdir):
    _make(workdir, {"x.bin": b"\x00\x01", "y.bin": b"data", "z.bin": b""})
    create_archive("out.arc", ["y.bin", "x.bin", "z.bin"])
    assert list_archive("out.arc") == ["y.bin", "x.bin", "z.bin"]


def test_extract_round_trip(workdir):
    files = {"one.txt": b"first file\n", "two.bin": bytes(range(256)) * 3}
    _make(workdir, files)
    create_archive("pack.arc", list(files))
    for name in files:
        (workdir / name).unlink()
    assert extract_archive("pack.arc") == list(files)
    for name, data in files.items():
        assert (workdir / name).read_bytes() == data


def test_extract_overwrites_existing(workdir):
    _make(workdir, {"f": b"original"})
    create_archive("pack.arc", ["f"])
    (workdir / "f").write_bytes(b"changed content")
    assert extract_archive("pack.arc") == ["f"]
    assert (workdir / "f").read_bytes() == b"original"


def test_empty_archive(workdir):
    create_archive("empty.arc", [])
    assert list_archive("empty.arc") == []
    assert extract_archive("empty.arc") == []


def test_missing_input_removes_archive(workdir):
    _make(workdir, {"present": b"ok"})
    with pytest.raises(ArchiveError, match="can't open file missing"):
        create_archive("out.arc", ["present", "missing"])
    assert not (workdir / "out.arc").exists()


def test_archive_name_equal_to_input(workdir):
    _make(workdir, {"same": b"keep me"})
    with pytest.raises(ArchiveError, match="equal to arc name"):
        create_archive("same", ["same"])
    assert (workdir / "same").read_bytes() == b"keep me"


def test_not_an_archive(workdir):
    (workdir / "bogus").write_bytes(b"notanarc" + b"\x00" * 8)
    with pytest.raises(ArchiveError, match="not arc file"):
        list_archive("bogus")


def test_short_header_is_read_error(workdir):
    (workdir / "short").write_bytes(b"arc")
    with pytest.raises(ArchiveError, match="read error"):
        extract_archive("short")


def test_missing_archive(workdir):
    with pytest.raises(ArchiveError, match="can't open archive file"):
        list_archive("nope.arc")


def test_truncated_data_stops_extraction(workdir):
    _make(workdir, {"a": b"alpha", "b": b"bravo-bravo"})
    create_archive("pack.arc", ["a", "b"])
    raw = (workdir / "pack.arc").read_bytes()
    (workdir / "cut.arc").write_bytes(raw[:-3])
    (workdir / "a").unlink()
    (workdir / "b").unlink()
    with pytest.raises(ArchiveError, match="read error"):
        extract_archive("cut.arc")
    assert (workdir / "a").read_bytes() == b"alpha"
    assert not (workdir / "b").exists()


def test_truncated_entry_header_breaks_listing(workdir):
    _make(workdir, {"a": b"alpha", "b": b"bravo"})
    create_archive("pack.arc", ["a", "b"])
    raw = (workdir / "pack.arc").read_bytes()
    first_entry_end = 12 + 16 + 2 + 5
    (workdir / "cut.arc").write_bytes(raw[: first_entry_end + 4])
    with pytest.raises(ArchiveError, match="read error"):
        list_archive("cut.arc")


def test_main_create_and_list(workdir, capsys):
    _make(workdir, {"p": b"pp", "q": b"qq"})
    assert main(["--file", "m.arc", "--create", "p", "q"]) == 0
    assert main(["--file", "m.arc", "--list"]) == 0
    assert capsys.readouterr().out.splitlines() == ["p", "q"]


def test_main_extract_reports_files(workdir, capsys):
    _make(workdir, {"p": b"payload"})
    main(["--file", "m.arc", "--create", "p"])
    (workdir / "p").unlink()
    assert main(["--file", "m.arc", "--extract"]) == 0
    assert capsys.readouterr().out.splitlines() == ["creating file p"]
    assert (workdir / "p").read_bytes() == b"payload"


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["--file", "m.arc"],
        ["--file", "m.arc", "--create"],
        ["--file", "m.arc", "--list", "extra"],
        ["--archive", "m.arc", "--list"],
    ],
)
def test_main_invalid_args(workdir, capsys, args):
    assert main(args) == 1
    assert capsys.readouterr().out == "Invalid args\n"


def test_main_same_name_error(workdir, capsys):
    _make(workdir, {"m.arc": b"x"})
    assert main(["--file", "m.arc", "--create", "m.arc"]) == 1
    assert "equal to arc name" in capsys.readouterr().err
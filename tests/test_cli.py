import pytest

from carousel.cli import build_parser, collect_images, main
from carousel.config import DEFAULT_DEST_FOLDER
from carousel.errors import StartupError


def test_parser_defaults():
    args = build_parser().parse_args(["a.png", "b.png"])
    assert args.paths == ["a.png", "b.png"]
    assert args.dest_folder == DEFAULT_DEST_FOLDER
    assert not args.overwrite
    assert not args.quiet


def test_parser_options():
    args = build_parser().parse_args(["-d", "keep", "--overwrite", "-q", "x.jpg"])
    assert args.dest_folder == "keep"
    assert args.overwrite and args.quiet


def test_parser_requires_a_path():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_collect_keeps_file_order_and_expands_directories(tmp_path):
    album = tmp_path / "album"
    album.mkdir()
    for name in ("b.jpg", "a.PNG", "notes.txt", "c.webp"):
        (album / name).write_bytes(b"x")
    (album / "nested").mkdir()
    single = tmp_path / "z.gif"
    single.write_bytes(b"x")

    images = collect_images([str(single), str(album)])
    assert images == [
        str(single),
        str(album / "a.PNG"),
        str(album / "b.jpg"),
        str(album / "c.webp"),
    ]


def test_collect_rejects_missing_paths(tmp_path):
    with pytest.raises(StartupError, match="no such file"):
        collect_images([str(tmp_path / "missing.jpg")])


def test_main_reports_startup_error(tmp_path, capsys):
    assert main([str(tmp_path / "missing.jpg")]) == 1
    assert "no such file or directory" in capsys.readouterr().err

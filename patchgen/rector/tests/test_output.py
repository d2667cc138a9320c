from pathlib import Path

from patchgen.rector.output import write_patches


def test_write_patches_creates_dir_and_files(tmp_path: Path):
    out_dir = tmp_path / "patches" / "nested"
    patches = {
        "T-a_b_One.php.patch": "@package a/b\n@ticket T\n-1\n+2\n",
        "T-c_d_Two.php.patch": "@package c/d\n@ticket T\n-3\n+4",
    }

    written = write_patches(patches, out_dir)

    assert written == [out_dir / name for name in patches]
    for name, content in patches.items():
        assert (out_dir / name).read_bytes() == content.encode("utf-8")


def test_write_patches_overwrites(tmp_path: Path):
    target = tmp_path / "T-x.patch"
    target.write_text("stale", encoding="utf-8")

    write_patches({"T-x.patch": "fresh\n"}, tmp_path)

    assert target.read_text(encoding="utf-8") == "fresh\n"


def test_write_patches_keeps_crlf(tmp_path: Path):
    write_patches({"T-x.patch": "-a\r\n+b\r\n"}, tmp_path)
    assert (tmp_path / "T-x.patch").read_bytes() == b"-a\r\n+b\r\n"


def test_write_patches_empty(tmp_path: Path):
    assert write_patches({}, tmp_path / "out") == []
    assert (tmp_path / "out").is_dir()

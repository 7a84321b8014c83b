"""디렉터리 순회를 검증합니다./Validate directory walking."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from tests.fixtures.virtual_fs import bulk_create_files, create_sized_tree
from warmfs import DirectoryWalker


def _relative(root: Path, paths: list[Path]) -> list[str]:
    return sorted(path.relative_to(root).as_posix() for path in paths)


def test_walker_yields_nested_regular_files(tmp_path: Path) -> None:
    """중첩된 파일을 모두 생성합니다./Yield every nested regular file."""

    create_sized_tree(tmp_path, {"a.txt": 1, "x/b.txt": 2, "x/y/z/c.txt": 3})
    (tmp_path / "empty_dir").mkdir()
    files = list(DirectoryWalker(tmp_path).iter_files())
    assert _relative(tmp_path, files) == ["a.txt", "x/b.txt", "x/y/z/c.txt"]


def test_walker_is_lazy(tmp_path: Path) -> None:
    """순회는 지연 평가됩니다./Walking is lazy."""

    list(bulk_create_files(tmp_path / "bulk", 30))
    iterator = DirectoryWalker(tmp_path).iter_files()
    first = next(iterator)
    assert first.is_file()


def test_missing_root_is_reported(tmp_path: Path) -> None:
    """없는 루트는 보고 후 빈 결과입니다./Missing root is reported and yields nothing."""

    errors: list[Path] = []
    missing = tmp_path / "missing"
    walker = DirectoryWalker(missing, report_error=lambda path, exc: errors.append(path))
    assert list(walker.iter_files()) == []
    assert errors == [missing]


def test_file_root_yields_itself(tmp_path: Path) -> None:
    """파일 루트는 자기 자신을 생성합니다./A file root yields itself."""

    single = tmp_path / "single.bin"
    single.write_bytes(b"1")
    assert list(DirectoryWalker(single).iter_files()) == [single]


def test_links_not_followed_by_default(tmp_path: Path, make_symlink) -> None:
    """기본값은 링크를 따르지 않습니다./Links are not followed by default."""

    outside = tmp_path / "outside"
    create_sized_tree(outside, {"hidden.txt": 4})
    root = tmp_path / "root"
    create_sized_tree(root, {"own.txt": 1})
    make_symlink(root / "dir_link", outside, target_is_directory=True)
    make_symlink(root / "file_link", outside / "hidden.txt")
    files = list(DirectoryWalker(root).iter_files())
    assert _relative(root, files) == ["own.txt"]


def test_links_followed_when_enabled(tmp_path: Path, make_symlink) -> None:
    """설정 시 링크를 따릅니다./Links are followed when enabled."""

    outside = tmp_path / "outside"
    create_sized_tree(outside, {"hidden.txt": 4})
    root = tmp_path / "root"
    create_sized_tree(root, {"own.txt": 1})
    make_symlink(root / "dir_link", outside, target_is_directory=True)
    files = list(DirectoryWalker(root, follow_links=True).iter_files())
    assert _relative(root, files) == ["dir_link/hidden.txt", "own.txt"]


def test_cyclic_links_terminate(tmp_path: Path, make_symlink) -> None:
    """순환 링크에서도 종료되며 중복이 없습니다./Cycles terminate without duplicates."""

    root = tmp_path / "root"
    create_sized_tree(root, {"a.txt": 1, "sub/b.txt": 2})
    make_symlink(root / "sub" / "back", root, target_is_directory=True)
    make_symlink(root / "self", root / "sub", target_is_directory=True)
    files = list(DirectoryWalker(root, follow_links=True).iter_files())
    assert len(files) == 2
    assert {path.name for path in files} == {"a.txt", "b.txt"}


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="permission checks need a non-root POSIX user",
)
def test_unreadable_directory_is_skipped(tmp_path: Path) -> None:
    """읽을 수 없는 디렉터리는 건너뜁니다./Unreadable directories are skipped."""

    create_sized_tree(tmp_path, {"ok.txt": 1, "locked/secret.txt": 1})
    locked = tmp_path / "locked"
    locked.chmod(0)
    errors: list[Path] = []
    try:
        walker = DirectoryWalker(tmp_path, report_error=lambda path, exc: errors.append(path))
        files = list(walker.iter_files())
    finally:
        locked.chmod(0o755)
    assert _relative(tmp_path, files) == ["ok.txt"]
    assert errors == [locked]

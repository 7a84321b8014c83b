'''KR: 테스트 트리 픽스처. EN: Pytest tree fixtures.'''

from __future__ import annotations

import os
from pathlib import Path

import pytest


@pytest.fixture
def warm_tree(tmp_path: Path) -> Path:
    '''워밍 대상 트리를 구성한다(KR). Provision a small tree to warm (EN).'''

    root = tmp_path / 'root'
    (root / 'sub').mkdir(parents=True)
    (root / 'a.txt').write_bytes(b'a' * 500)
    (root / 'sub' / 'b.txt').write_bytes(b'b' * 2000)
    return root


@pytest.fixture
def make_symlink():
    '''심볼릭 링크를 만들거나 테스트를 건너뛴다(KR). Create a symlink or skip (EN).'''

    def _make(link: Path, target: Path, target_is_directory: bool = False) -> Path:
        if not hasattr(os, 'symlink'):
            pytest.skip('symlinks unsupported')
        try:
            link.symlink_to(target, target_is_directory=target_is_directory)
        except (OSError, NotImplementedError) as exc:
            pytest.skip(f'symlinks unavailable: {exc}')
        return link

    return _make

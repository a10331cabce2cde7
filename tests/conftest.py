"""pytest設定とフィクスチャ定義"""

import sys
from pathlib import Path

import pytest

# contractoolモジュールをインポート可能にする
REPO_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(REPO_ROOT))

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """フィクスチャディレクトリ"""
    return FIXTURES_DIR

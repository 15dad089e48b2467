"""
データモデル定義

Conversion Checkerで使用するデータクラスを定義します。
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple


# 出力ディレクトリ省略時に使用する入力ディレクトリ配下のサブディレクトリ名
DEFAULT_OUTPUT_SUBDIR = 'jpg'

DEFAULT_MATCH_PREVIEW_LIMIT = 10


@dataclass
class MatchedPair:
    """入力ファイルと変換後ファイルの対応"""
    input: str
    output: str  # タイムスタンプ除去済みのファイル名


@dataclass
class ReconcileResult:
    """突き合わせ結果"""
    matched_files: List[MatchedPair] = field(default_factory=list)
    missing_files: List[str] = field(default_factory=list)
    unmatched_outputs: List[str] = field(default_factory=list)

    @property
    def matched_count(self) -> int:
        return len(self.matched_files)

    @property
    def missing_count(self) -> int:
        return len(self.missing_files)


@dataclass
class ReconcileConfig:
    """実行設定"""
    input_dir: Path
    output_dir: Optional[Path] = None
    sort_names: bool = False
    match_preview_limit: int = DEFAULT_MATCH_PREVIEW_LIMIT
    verbose: bool = False
    log_file: Optional[Path] = None

    def resolved_output_dir(self) -> Path:
        """出力ディレクトリを取得（未指定の場合は入力ディレクトリ/jpg）"""
        if self.output_dir is not None:
            return self.output_dir
        return self.input_dir / DEFAULT_OUTPUT_SUBDIR


@dataclass
class ReconcileStats:
    """処理統計情報"""
    input_files_found: int
    output_files_found: int
    matches_found: int
    missing_found: int
    unmatched_outputs_found: int
    ambiguous_outputs: List[Tuple[str, List[str]]]  # (output, 対応した入力ファイル一覧)

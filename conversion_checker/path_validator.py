"""
パス検証ユーティリティ

ディレクトリパスの検証とクロスプラットフォーム対応を提供します。
"""

import os
from pathlib import Path

from .exceptions import ValidationError


class PathValidator:
    """パス検証を行うユーティリティクラス"""
    
    @staticmethod
    def validate_directory(path: Path) -> None:
        """
        ディレクトリの存在とアクセス権を検証
        
        Args:
            path: 検証するディレクトリパス
            
        Raises:
            ValidationError: ディレクトリが存在しない、アクセス不可能、
                           またはディレクトリではない場合
        """
        if not path.exists():
            raise ValidationError(f"ディレクトリが存在しません: {path}")
        
        if not path.is_dir():
            raise ValidationError(f"指定されたパスはディレクトリではありません: {path}")
        
        # 読み取り権限の確認
        if not os.access(path, os.R_OK):
            raise ValidationError(f"ディレクトリに読み取り権限がありません: {path}")
    
    @staticmethod
    def normalize_path(path_str: str) -> Path:
        """
        パス文字列を正規化してPathオブジェクトに変換
        
        Args:
            path_str: パス文字列（~ を含んでもよい）
            
        Returns:
            正規化されたPathオブジェクト
        """
        return Path(path_str).expanduser().resolve()

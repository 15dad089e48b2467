"""
ファイルスキャナー

ディレクトリ直下のエントリを列挙し、対象となる画像ファイル名を抽出する機能を提供します。
"""

import logging
import os
from pathlib import Path
from typing import List, Set, Tuple, Union


class FileScanner:
    """ディレクトリをスキャンして画像ファイル名を検索するクラス"""
    
    # 対象拡張子（比較時に小文字化する）
    IMAGE_EXTENSIONS: Set[str] = {
        '.heic',
        '.png',
        '.jpg',
        '.jpeg',
    }
    
    def __init__(self):
        """FileScannerを初期化"""
        self.logger = logging.getLogger(__name__)
    
    def list_image_filenames(self, directory: Union[str, Path]) -> List[str]:
        """
        ディレクトリ直下のエントリから画像ファイル名を抽出
        
        サブディレクトリは検索しません。名前が対象拡張子で終わるサブディレクトリは
        除外されずに結果へ含まれます。並び順はos.listdirの返す順序のままです。
        
        Args:
            directory: スキャンするディレクトリ
            
        Returns:
            対象拡張子を持つエントリ名のリスト
            
        Raises:
            OSError: ディレクトリが存在しない、または読み取れない場合
        """
        entries = os.listdir(directory)
        filenames = [name for name in entries if self.is_image_filename(name)]
        
        self.logger.debug(f"スキャン完了: {directory} ({len(entries)}エントリ中 {len(filenames)}個が対象)")
        return filenames
    
    def split_extension(self, filename: str) -> Tuple[str, str]:
        """
        ファイル名をベース名と拡張子に分割
        
        最後のドット以降を拡張子とします。先頭のドットだけを持つ名前（".heic"）と
        ".." は拡張子なしとみなします。"..heic" は ".heic" を拡張子として扱います。
        
        Args:
            filename: ファイル名
            
        Returns:
            (ベース名, 拡張子) のタプル
        """
        dot = filename.rfind('.')
        if dot <= 0 or filename == '..':
            return filename, ''
        return filename[:dot], filename[dot:]
    
    def get_basename(self, filename: str) -> str:
        """
        ファイル名からベース名（最後の拡張子を除いたファイル名）を取得
        
        大文字小文字はそのまま保持します。
        
        Args:
            filename: ファイル名
            
        Returns:
            ベース名
        """
        return self.split_extension(filename)[0]
    
    def get_extension(self, filename: str) -> str:
        """拡張子（先頭のドットを含む、小文字）を取得"""
        return self.split_extension(filename)[1].lower()
    
    def is_image_filename(self, filename: str) -> bool:
        """
        ファイル名が対象拡張子を持つかどうかを判定
        
        Args:
            filename: ファイル名
            
        Returns:
            対象拡張子の場合True
        """
        return self.get_extension(filename) in self.IMAGE_EXTENSIONS

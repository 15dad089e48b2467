"""
ファイル名正規化

変換処理で付与されたタイムスタンプ接尾辞（_<数字>）をファイル名から除去します。
"""

import re
from typing import Iterable, List

# 拡張子の直前にある "_<数字>" を文字列末尾に固定して検出する
TIMESTAMP_PATTERN = re.compile(r'_\d+(\.\w+)\Z', re.ASCII)


def remove_timestamp(filename: str) -> str:
    """
    ファイル名末尾のタイムスタンプ接尾辞を除去
    
    拡張子はそのまま残します。接尾辞がない場合は入力をそのまま返します。
    
    例:
        IMG001_1699999999.jpg -> IMG001.jpg
        photo_1_002.jpg       -> photo_1.jpg
        img123.jpg            -> img123.jpg
    
    Args:
        filename: ファイル名
        
    Returns:
        接尾辞を除去したファイル名
    """
    return TIMESTAMP_PATTERN.sub(r'\1', filename, count=1)


def has_timestamp(filename: str) -> bool:
    """ファイル名がタイムスタンプ接尾辞を持つ場合True"""
    return TIMESTAMP_PATTERN.search(filename) is not None


def normalize_output_filenames(filenames: Iterable[str]) -> List[str]:
    """変換後ファイル名のリストを順序を保ったまま正規化"""
    return [remove_timestamp(filename) for filename in filenames]

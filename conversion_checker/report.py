"""
レポート出力

突き合わせ結果をコンソール向けのテキストレポートとして整形・出力します。
"""

import sys
from typing import List, Optional, TextIO

from .models import DEFAULT_MATCH_PREVIEW_LIMIT, ReconcileResult


def format_report(result: ReconcileResult, input_count: int, output_count: int,
                  preview_limit: int = DEFAULT_MATCH_PREVIEW_LIMIT) -> List[str]:
    """
    レポートの各行を作成
    
    Args:
        result: 突き合わせ結果
        input_count: 変換元ファイル数
        output_count: 変換後ファイル数
        preview_limit: 表示するマッチ件数の上限
        
    Returns:
        レポートの行のリスト（改行文字を含まない）
    """
    lines = ['Files that failed to convert:']
    lines.extend(result.missing_files)
    
    lines.append('')
    lines.append(f'Total missing files: {result.missing_count}')
    lines.append(f'Input files: {input_count}')
    lines.append(f'Output files: {output_count}')
    
    lines.append('')
    lines.append(f'Matched files (first {preview_limit}):')
    for pair in result.matched_files[:preview_limit]:
        lines.append(f'{pair.input} -> {pair.output}')
    
    lines.append('')
    lines.append('Unmatched output files:')
    lines.extend(result.unmatched_outputs)
    
    return lines


def print_report(result: ReconcileResult, input_count: int, output_count: int,
                 preview_limit: int = DEFAULT_MATCH_PREVIEW_LIMIT,
                 stream: Optional[TextIO] = None) -> None:
    """レポートを出力（省略時は標準出力）"""
    if stream is None:
        stream = sys.stdout
    
    for line in format_report(result, input_count, output_count, preview_limit):
        print(line, file=stream)

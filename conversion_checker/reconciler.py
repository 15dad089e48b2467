"""
突き合わせ処理モジュール

変換元ファイルと変換後ファイルのファイル名を突き合わせ、
変換に失敗したファイルと対応する変換元がない出力ファイルを特定します。
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from .file_scanner import FileScanner
from .models import MatchedPair, ReconcileResult


class Reconciler:
    """変換元ファイルと変換後ファイルを突き合わせるクラス"""
    
    def __init__(self):
        """Reconcilerを初期化"""
        self.file_scanner = FileScanner()
        self.logger = logging.getLogger(__name__)
    
    def reconcile(self, input_files: Sequence[str], output_files: Sequence[str]) -> ReconcileResult:
        """
        変換元ファイルと変換後ファイルを突き合わせる
        
        各入力ファイルについて、出力ファイルを与えられた順に走査し、最初に条件を
        満たしたものを対応とします。対応済みの出力ファイルは以降の走査対象から
        除外しないため、1つの出力ファイルが複数の入力ファイルに対応することがあります。
        
        Args:
            input_files: 変換元ファイル名のシーケンス
            output_files: 変換後ファイル名のシーケンス（タイムスタンプ除去済み）
            
        Returns:
            突き合わせ結果
        """
        result = ReconcileResult()
        
        for input_file in input_files:
            matched_output = self._find_matching_output(input_file, output_files)
            
            if matched_output is not None:
                result.matched_files.append(MatchedPair(input=input_file, output=matched_output))
                self.logger.debug(f"マッチ発見: {input_file} -> {matched_output}")
            else:
                result.missing_files.append(input_file)
                self.logger.debug(f"マッチなし: {input_file}")
        
        # 出力ファイル名の文字列一致で判定する
        claimed_outputs = {pair.output for pair in result.matched_files}
        result.unmatched_outputs = [o for o in output_files if o not in claimed_outputs]
        
        self.logger.debug(
            f"突き合わせ完了: マッチ {result.matched_count}個, 未変換 {result.missing_count}個, "
            f"対応なし出力 {len(result.unmatched_outputs)}個"
        )
        return result
    
    def _find_matching_output(self, input_file: str, output_files: Sequence[str]) -> Optional[str]:
        """
        入力ファイルに対応する最初の出力ファイルを検索
        
        出力ファイル名が入力のベース名で始まる場合、または出力ファイルのベース名が
        入力のベース名と完全一致する場合に対応とみなします。
        """
        input_name = self.file_scanner.get_basename(input_file)
        
        for output_file in output_files:
            if output_file.startswith(input_name) or self.file_scanner.get_basename(output_file) == input_name:
                return output_file
        
        return None
    
    def find_ambiguous_outputs(self, result: ReconcileResult) -> List[Tuple[str, List[str]]]:
        """
        複数の入力ファイルに対応付けられた出力ファイルを検出
        
        Args:
            result: 突き合わせ結果
            
        Returns:
            (出力ファイル名, 対応した入力ファイル名のリスト) のリスト（最初の対応順）
        """
        claims: Dict[str, List[str]] = {}
        for pair in result.matched_files:
            claims.setdefault(pair.output, []).append(pair.input)
        
        return [(output, inputs) for output, inputs in claims.items() if len(inputs) > 1]
    
    def get_match_statistics(self, result: ReconcileResult) -> dict:
        """
        突き合わせ統計情報を取得
        
        Args:
            result: 突き合わせ結果
            
        Returns:
            統計情報の辞書
        """
        exact_count = sum(
            1 for pair in result.matched_files
            if self.file_scanner.get_basename(pair.output) == self.file_scanner.get_basename(pair.input)
        )
        
        return {
            'total_matches': result.matched_count,
            'exact_basename_matches': exact_count,
            'prefix_only_matches': result.matched_count - exact_count,
        }

"""
突き合わせ管理モジュール

ディレクトリのスキャン、ファイル名の正規化、突き合わせ、レポート出力を
統合的に実行します。
"""

from typing import List, Optional, TextIO

from .file_scanner import FileScanner
from .logger import ProgressLogger, create_default_logger
from .models import ReconcileConfig, ReconcileResult, ReconcileStats
from .normalizer import has_timestamp, normalize_output_filenames
from .reconciler import Reconciler
from .report import print_report


class ReconcileManager:
    """突き合わせ処理を担当するクラス"""
    
    def __init__(self, progress_logger: Optional[ProgressLogger] = None):
        """
        ReconcileManagerを初期化
        
        Args:
            progress_logger: 使用するロガー（省略時は実行ごとに設定から作成）
        """
        self.file_scanner = FileScanner()
        self.reconciler = Reconciler()
        self.progress_logger = progress_logger
    
    def run(self, config: ReconcileConfig, stream: Optional[TextIO] = None) -> ReconcileResult:
        """
        変換元と変換後のディレクトリを突き合わせてレポートを出力
        
        ロガーが注入されていない場合は実行ごとに設定からロガーを作成し、
        実行終了時にハンドラーを閉じます。
        
        Args:
            config: 実行設定
            stream: レポートの出力先（省略時は標準出力）
            
        Returns:
            突き合わせ結果
            
        Raises:
            OSError: ディレクトリの読み取りに失敗した場合
        """
        if self.progress_logger is not None:
            return self._run(config, stream, self.progress_logger)
        
        progress_logger = create_default_logger(verbose=config.verbose, log_file=config.log_file)
        try:
            return self._run(config, stream, progress_logger)
        finally:
            progress_logger.close()
    
    def _run(self, config: ReconcileConfig, stream: Optional[TextIO],
             progress_logger: ProgressLogger) -> ReconcileResult:
        """1回分の突き合わせ処理"""
        input_dir = config.input_dir
        output_dir = config.resolved_output_dir()
        progress_logger.log_processing_start(input_dir, output_dir)
        
        try:
            # 1. ディレクトリのスキャン
            input_files = self.file_scanner.list_image_filenames(input_dir)
            progress_logger.log_scan_complete(input_dir, len(input_files))
            
            raw_output_files = self.file_scanner.list_image_filenames(output_dir)
            progress_logger.log_scan_complete(output_dir, len(raw_output_files))
        except OSError as e:
            progress_logger.log_error(e.filename or input_dir, "ディレクトリの読み取りに失敗しました", e)
            raise
        
        # 2. タイムスタンプ除去
        output_files = normalize_output_filenames(raw_output_files)
        progress_logger.log_normalized(sum(1 for f in raw_output_files if has_timestamp(f)))
        
        # 3. 並び順の固定（指定時のみ）
        if config.sort_names:
            input_files = sorted(input_files)
            output_files = sorted(output_files)
            progress_logger.log_debug("ファイル名をソートしてから突き合わせます")
        
        # 4. 突き合わせ
        result = self.reconciler.reconcile(input_files, output_files)
        
        ambiguous = self.reconciler.find_ambiguous_outputs(result)
        progress_logger.log_ambiguous_outputs(ambiguous)
        
        if config.verbose:
            stats = self.reconciler.get_match_statistics(result)
            progress_logger.log_info(f"  ベース名完全一致: {stats['exact_basename_matches']}個")
            progress_logger.log_info(f"  前方一致のみ: {stats['prefix_only_matches']}個")
        
        # 5. レポート出力
        print_report(result, len(input_files), len(output_files),
                     preview_limit=config.match_preview_limit, stream=stream)
        
        progress_logger.log_processing_complete(
            self._build_stats(result, input_files, output_files, ambiguous)
        )
        return result
    
    def _build_stats(self, result: ReconcileResult, input_files: List[str],
                     output_files: List[str], ambiguous) -> ReconcileStats:
        """処理統計情報を作成"""
        return ReconcileStats(
            input_files_found=len(input_files),
            output_files_found=len(output_files),
            matches_found=result.matched_count,
            missing_found=result.missing_count,
            unmatched_outputs_found=len(result.unmatched_outputs),
            ambiguous_outputs=ambiguous
        )

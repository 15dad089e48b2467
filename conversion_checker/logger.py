"""
ロギングシステム

Conversion Checkerのロギング機能を提供します。
コンソール出力（標準エラー）とファイル出力の両方をサポートします。
標準出力はレポート専用のため、ログは標準エラーに出力します。
"""

import logging
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple

from .models import ReconcileStats


@dataclass
class LogConfig:
    """ログ設定"""
    console_level: int = logging.INFO
    file_level: int = logging.DEBUG
    log_file: Optional[Path] = None


class ProgressLogger:
    """処理状況とロギングを管理するクラス"""
    
    def __init__(self, config: LogConfig):
        self.config = config
        self.logger = self._setup_logger()
        self._start_time: Optional[datetime] = None
        
    def _setup_logger(self) -> logging.Logger:
        """ロガーのセットアップ"""
        logger = logging.getLogger('conversion_checker')
        logger.setLevel(logging.DEBUG)
        
        # 既存のハンドラーをクリア
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        
        console_formatter = logging.Formatter(
            '%(message)s'
        )
        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(self.config.console_level)
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)
        
        if self.config.log_file:
            # ログディレクトリを作成
            self.config.log_file.parent.mkdir(parents=True, exist_ok=True)
            
            file_handler = logging.FileHandler(self.config.log_file, encoding='utf-8')
            file_handler.setLevel(self.config.file_level)
            file_handler.setFormatter(file_formatter)
            logger.addHandler(file_handler)
        
        return logger
    
    def log_processing_start(self, input_dir: Path, output_dir: Path):
        """処理開始時のサマリー表示"""
        self._start_time = datetime.now()
        
        self.logger.info("=" * 60)
        self.logger.info("Conversion Checker - 処理開始")
        self.logger.info("=" * 60)
        self.logger.info(f"開始時刻: {self._start_time.strftime('%Y-%m-%d %H:%M:%S')}")
        self.logger.info(f"変換元ディレクトリ: {input_dir}")
        self.logger.info(f"変換後ディレクトリ: {output_dir}")
        self.logger.info("")
    
    def log_scan_complete(self, directory: Path, files_found: int):
        """ディレクトリスキャン完了のログ"""
        self.logger.info(f"スキャン完了: {directory} ({files_found}個の画像ファイル)")
    
    def log_normalized(self, renamed_count: int):
        """タイムスタンプ除去結果のログ"""
        self.logger.debug(f"タイムスタンプ除去: {renamed_count}個のファイル名を正規化")
    
    def log_ambiguous_outputs(self, ambiguous_outputs: List[Tuple[str, List[str]]]):
        """複数の入力ファイルに対応した出力ファイルの警告"""
        for output, inputs in ambiguous_outputs:
            self.log_warning(f"複数の入力ファイルが同じ出力ファイルに対応: {output} <- {', '.join(inputs)}")
    
    def log_processing_complete(self, stats: ReconcileStats):
        """処理完了時のサマリー表示"""
        end_time = datetime.now()
        total_time = (end_time - self._start_time).total_seconds() if self._start_time else 0
        
        self.logger.info("")
        self.logger.info("=" * 60)
        self.logger.info("処理完了サマリー")
        self.logger.info("=" * 60)
        self.logger.info(f"終了時刻: {end_time.strftime('%Y-%m-%d %H:%M:%S')}")
        self.logger.info(f"総処理時間: {total_time:.2f}秒")
        self.logger.info("")
        self.logger.info("処理結果:")
        self.logger.info(f"  - 変換元ファイル数: {stats.input_files_found}")
        self.logger.info(f"  - 変換後ファイル数: {stats.output_files_found}")
        self.logger.info(f"  - マッチ数: {stats.matches_found}")
        self.logger.info(f"  - 未変換: {stats.missing_found}")
        self.logger.info(f"  - 対応なし出力: {stats.unmatched_outputs_found}")
        
        if stats.ambiguous_outputs:
            self.logger.info(f"  - 重複対応: {len(stats.ambiguous_outputs)}件")
        
        self.logger.info("=" * 60)
    
    def log_error(self, file_path: Path, error_message: str, exception: Optional[Exception] = None):
        """エラーログの詳細記録"""
        error_msg = f"エラー - {file_path}: {error_message}"
        
        if exception:
            error_msg += f" ({type(exception).__name__}: {str(exception)})"
        
        self.logger.error(error_msg)
        
        # 詳細なスタックトレースはファイルログのみに記録
        if exception and self.config.log_file:
            self.logger.debug("スタックトレース:", exc_info=exception)
    
    def log_warning(self, message: str):
        """警告メッセージのログ"""
        self.logger.warning(f"警告: {message}")
    
    def log_info(self, message: str):
        """情報メッセージのログ"""
        self.logger.info(message)
    
    def log_debug(self, message: str):
        """デバッグメッセージのログ"""
        self.logger.debug(message)
    
    def close(self):
        """ハンドラーを閉じてロガーから取り外す"""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)


def create_default_logger(verbose: bool = False, log_file: Optional[Path] = None) -> ProgressLogger:
    """デフォルトのロガーを作成"""
    config = LogConfig(
        console_level=logging.DEBUG if verbose else logging.INFO,
        file_level=logging.DEBUG,
        log_file=log_file
    )
    return ProgressLogger(config)


def get_default_log_file() -> Path:
    """デフォルトのログファイルパスを取得"""
    log_dir = Path.home() / '.conversion_checker' / 'logs'
    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    return log_dir / f'conversion_checker_{timestamp}.log'

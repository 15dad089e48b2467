"""
ロギングシステムのプロパティベーステスト

Property 6: エラーログの完全性
"""

import tempfile
import logging
from pathlib import Path
from hypothesis import given, strategies as st
from hypothesis import settings

from conversion_checker.logger import ProgressLogger, LogConfig, create_default_logger, get_default_log_file
from conversion_checker.models import ReconcileStats


class TestLoggerProperties:
    """ロギングシステムのプロパティテスト"""
    
    @given(
        file_paths=st.lists(
            st.text(min_size=1, max_size=100).filter(lambda x: x.strip() and '/' not in x and '\\' not in x and '\n' not in x and '\r' not in x),
            min_size=1,
            max_size=10
        ),
        error_messages=st.lists(
            st.text(min_size=1, max_size=200).filter(lambda x: x.strip() and '\n' not in x and '\r' not in x),
            min_size=1,
            max_size=10
        )
    )
    @settings(max_examples=100)
    def test_error_log_completeness_property(self, file_paths, error_messages):
        """
        **Property 6: エラーログの完全性**
        
        任意のエラーに対して、エラーログはエラーが発生したパスと
        エラーの説明の両方を含むべきである。
        """
        with tempfile.TemporaryDirectory() as temp_dir:
            log_file = Path(temp_dir) / 'test.log'
            config = LogConfig(
                console_level=logging.CRITICAL,  # コンソール出力を抑制
                file_level=logging.DEBUG,
                log_file=log_file
            )
            logger = ProgressLogger(config)
            
            try:
                logged_errors = []
                for i, (file_path_str, error_msg) in enumerate(zip(file_paths, error_messages)):
                    file_path = Path(f"test_dir_{i}_{file_path_str}")
                    logger.log_error(file_path, error_msg)
                    logged_errors.append((file_path, error_msg))
            finally:
                logger.close()
            
            log_content = log_file.read_text(encoding='utf-8')
            
            for file_path, error_msg in logged_errors:
                assert str(file_path) in log_content, f"ログにパス '{file_path}' が含まれていません"
                assert error_msg in log_content, f"ログにエラーメッセージ '{error_msg}' が含まれていません"
                assert "エラー" in log_content


class TestProgressLogger:
    """ProgressLoggerのユニットテスト"""
    
    def test_console_output_goes_to_stderr(self, capsys):
        """コンソールログは標準エラーに出力され、標準出力には出力されない"""
        logger = create_default_logger()
        
        try:
            logger.log_info("スキャン中")
        finally:
            logger.close()
        
        captured = capsys.readouterr()
        assert "スキャン中" in captured.err
        assert captured.out == ""
    
    def test_debug_hidden_unless_verbose(self, capsys):
        """デバッグログはverbose指定時のみコンソールに表示される"""
        quiet = create_default_logger(verbose=False)
        try:
            quiet.log_debug("quiet-debug")
        finally:
            quiet.close()
        
        verbose = create_default_logger(verbose=True)
        try:
            verbose.log_debug("verbose-debug")
        finally:
            verbose.close()
        
        captured = capsys.readouterr()
        assert "quiet-debug" not in captured.err
        assert "verbose-debug" in captured.err
    
    def test_ambiguous_outputs_are_logged_as_warnings(self):
        """重複対応は警告としてログファイルに記録される"""
        with tempfile.TemporaryDirectory() as temp_dir:
            log_file = Path(temp_dir) / 'logs' / 'run.log'
            logger = ProgressLogger(LogConfig(console_level=logging.CRITICAL, log_file=log_file))
            
            try:
                logger.log_ambiguous_outputs([('IMG10.jpg', ['IMG1.heic', 'IMG10.heic'])])
            finally:
                logger.close()
            
            content = log_file.read_text(encoding='utf-8')
            assert "WARNING" in content
            assert "IMG10.jpg <- IMG1.heic, IMG10.heic" in content
    
    def test_processing_summary(self):
        """処理完了サマリーに各件数が記録される"""
        with tempfile.TemporaryDirectory() as temp_dir:
            log_file = Path(temp_dir) / 'run.log'
            logger = ProgressLogger(LogConfig(console_level=logging.CRITICAL, log_file=log_file))
            stats = ReconcileStats(
                input_files_found=5,
                output_files_found=4,
                matches_found=3,
                missing_found=2,
                unmatched_outputs_found=1,
                ambiguous_outputs=[]
            )
            
            try:
                logger.log_processing_start(Path(temp_dir), Path(temp_dir) / 'jpg')
                logger.log_processing_complete(stats)
            finally:
                logger.close()
            
            content = log_file.read_text(encoding='utf-8')
            assert "変換元ファイル数: 5" in content
            assert "変換後ファイル数: 4" in content
            assert "マッチ数: 3" in content
            assert "未変換: 2" in content
            assert "対応なし出力: 1" in content
            assert "重複対応" not in content
    
    def test_default_log_file_location(self):
        """デフォルトのログファイルはホームディレクトリ配下"""
        log_file = get_default_log_file()
        
        assert log_file.parent == Path.home() / '.conversion_checker' / 'logs'
        assert log_file.name.startswith('conversion_checker_')
        assert log_file.suffix == '.log'
    
    def test_close_detaches_handlers(self):
        """close() はログファイルを閉じ、ハンドラーをロガーから取り外す"""
        with tempfile.TemporaryDirectory() as temp_dir:
            log_file = Path(temp_dir) / 'run.log'
            logger = ProgressLogger(LogConfig(console_level=logging.CRITICAL, log_file=log_file))
            logger.log_info("記録")
            
            logger.close()
            
            assert logging.getLogger('conversion_checker').handlers == []
            assert "記録" in log_file.read_text(encoding='utf-8')

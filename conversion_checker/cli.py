"""
コマンドラインインターフェース

Conversion Checkerのメインエントリーポイントです。
変換元ディレクトリと変換後ディレクトリを突き合わせ、変換に失敗したファイルを表示します。
"""

import argparse
import sys
from typing import List, Optional

from .exceptions import ProcessingError, ValidationError
from .logger import get_default_log_file
from .models import DEFAULT_OUTPUT_SUBDIR, ReconcileConfig
from .path_validator import PathValidator
from .reconcile_manager import ReconcileManager


def create_parser() -> argparse.ArgumentParser:
    """
    コマンドライン引数パーサーを作成
    
    Returns:
        設定済みのArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog='conversion-checker',
        description='変換元の画像ファイルと変換後のファイルを突き合わせ、変換に失敗したファイルを表示するツール',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
使用例:
  # 変換後ファイルが <変換元>/{DEFAULT_OUTPUT_SUBDIR} にある場合
  conversion-checker /path/to/photos
  
  # 変換後ディレクトリを指定
  conversion-checker /path/to/photos --output-dir /path/to/converted
  
  # ファイル名をソートしてから突き合わせる（結果を実行環境に依存させない）
  conversion-checker /path/to/photos --sort
  
  # 詳細ログを表示
  conversion-checker /path/to/photos --verbose
        """
    )
    parser.add_argument(
        'input_dir',
        type=str,
        help='変換元の画像ファイルがあるディレクトリパス'
    )
    parser.add_argument(
        '--output-dir', '-o',
        type=str,
        help=f'変換後のファイルがあるディレクトリパス（デフォルトは <input_dir>/{DEFAULT_OUTPUT_SUBDIR}）'
    )
    parser.add_argument(
        '--sort',
        action='store_true',
        help='突き合わせ前に両方のファイル名をソートする（デフォルトはディレクトリの列挙順）'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='詳細ログを表示'
    )
    parser.add_argument(
        '--log-file',
        type=str,
        help='ログファイルのパス（--verbose指定時の省略値は ~/.conversion_checker/logs/ 配下）'
    )
    
    return parser


def build_config(args) -> ReconcileConfig:
    """
    解析済みの引数から実行設定を作成
    
    Args:
        args: 解析されたコマンドライン引数
        
    Returns:
        実行設定
    """
    input_dir = PathValidator.normalize_path(args.input_dir)
    output_dir = PathValidator.normalize_path(args.output_dir) if args.output_dir else None
    
    log_file = None
    if args.log_file:
        log_file = PathValidator.normalize_path(args.log_file)
    elif args.verbose:
        log_file = get_default_log_file()
    
    return ReconcileConfig(
        input_dir=input_dir,
        output_dir=output_dir,
        sort_names=args.sort,
        verbose=args.verbose,
        log_file=log_file
    )


def handle_check_command(args) -> int:
    """
    突き合わせを実行
    
    Args:
        args: 解析されたコマンドライン引数
        
    Returns:
        終了コード（0: 成功、1: エラー）
    """
    try:
        config = build_config(args)
        
        # パス検証
        PathValidator.validate_directory(config.input_dir)
        PathValidator.validate_directory(config.resolved_output_dir())
        
        ReconcileManager().run(config)
        
        return 0
        
    except ValidationError as e:
        print(f"❌ 入力エラー: {e}", file=sys.stderr)
        return 1
    except ProcessingError as e:
        print(f"❌ 処理エラー: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"❌ ファイルシステムエラー: {e}", file=sys.stderr)
        return 1


def main(argv: Optional[List[str]] = None) -> int:
    """
    メインエントリーポイント
    
    Args:
        argv: コマンドライン引数（省略時はsys.argv）
    
    Returns:
        終了コード（0: 成功、1: エラー）
    """
    parser = create_parser()
    
    if argv is None:
        argv = sys.argv[1:]
    
    # 引数が指定されていない場合はヘルプを表示
    if not argv:
        parser.print_help()
        return 0
    
    args = parser.parse_args(argv)
    return handle_check_command(args)


if __name__ == '__main__':
    sys.exit(main())

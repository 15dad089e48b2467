# Conversion Checker
# A Python tool to find source images that failed to convert

from .models import MatchedPair, ReconcileResult, ReconcileConfig, ReconcileStats
from .exceptions import ProcessingError, ValidationError
from .path_validator import PathValidator
from .file_scanner import FileScanner
from .normalizer import remove_timestamp, has_timestamp, normalize_output_filenames
from .reconciler import Reconciler
from .report import format_report, print_report
from .logger import ProgressLogger, LogConfig, create_default_logger, get_default_log_file
from .reconcile_manager import ReconcileManager

__all__ = [
    'MatchedPair',
    'ReconcileResult',
    'ReconcileConfig',
    'ReconcileStats',
    'ProcessingError',
    'ValidationError',
    'PathValidator',
    'FileScanner',
    'remove_timestamp',
    'has_timestamp',
    'normalize_output_filenames',
    'Reconciler',
    'format_report',
    'print_report',
    'ProgressLogger',
    'LogConfig',
    'create_default_logger',
    'get_default_log_file',
    'ReconcileManager'
]

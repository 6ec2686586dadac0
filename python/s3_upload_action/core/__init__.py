"""S3 Upload Action コアモジュール"""
from .s3_client import S3ClientManager
from .key_mapper import KeyMapper
from .uploader import UploadExecutor, ParallelUploadExecutor
from .task_runner import TaskRunner

__all__ = [
    'S3ClientManager',
    'KeyMapper',
    'UploadExecutor',
    'ParallelUploadExecutor',
    'TaskRunner'
]

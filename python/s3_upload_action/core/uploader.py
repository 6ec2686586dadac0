"""S3アップロード実行クラス"""
from typing import Callable, List, Optional
from dataclasses import dataclass
from concurrent.futures import ThreadPoolExecutor

from boto3.s3.transfer import TransferConfig
from botocore.exceptions import BotoCoreError, ClientError
from ..models.config import UploadOptions
from ..utils.logger import LoggerManager
from ..utils.file_utils import FileInfo


@dataclass
class UploadTask:
    """個別のアップロードタスク"""
    file_info: FileInfo
    bucket: str
    key: str
    content_type: str


@dataclass
class UploadResult:
    """アップロード結果"""
    file_path: str
    key: str
    success: bool
    location: Optional[str] = None
    error: Optional[str] = None


class UploadExecutor:
    """ファイルアップロードの実行"""

    def __init__(self, s3_client, options: UploadOptions, locate: Callable[[str, str], str]):
        self.s3_client = s3_client
        self.options = options
        self.locate = locate
        self.logger = LoggerManager.get_logger()
        self.transfer_config = TransferConfig(
            multipart_threshold=options.multipart_threshold,
            multipart_chunksize=options.multipart_chunksize,
            max_concurrency=options.max_concurrency,
            use_threads=options.use_threads,
        )

    def upload_file(self, task: UploadTask) -> UploadResult:
        """単一ファイルをアップロード"""
        path = task.file_info.path
        try:
            # ファイル全体は読み込まずストリームで渡す
            with open(path, "rb") as body:
                self.s3_client.upload_fileobj(
                    body,
                    task.bucket,
                    task.key,
                    ExtraArgs={'ContentType': task.content_type},
                    Config=self.transfer_config,
                )
        except FileNotFoundError:
            return self._failed(task, f"File not found: {path}")
        except PermissionError:
            return self._failed(task, f"Permission denied for file: {path}")
        except (BotoCoreError, ClientError) as e:
            return self._failed(task, f"AWS error uploading {path}: {e}")
        except OSError as e:
            return self._failed(task, f"Error reading {path}: {e}")

        location = self.locate(task.bucket, task.key)
        self.logger.info(f"uploaded - {task.key}")
        self.logger.info(f"located - {location}")
        return UploadResult(path, task.key, success=True, location=location)

    def _failed(self, task: UploadTask, error: str) -> UploadResult:
        self.logger.error(error)
        return UploadResult(task.file_info.path, task.key, success=False, error=error)


class ParallelUploadExecutor:
    """並列アップロード実行"""

    def __init__(self, executor: UploadExecutor):
        self.executor = executor
        self.logger = LoggerManager.get_logger()

    def upload_files(self, upload_tasks: List[UploadTask]) -> List[UploadResult]:
        """全タスクを同時にアップロード

        ワーカー数はタスク数と同じ。結果は完了順ではなく投入順で返す。
        """
        if not upload_tasks:
            return []

        total_files = len(upload_tasks)
        self.logger.info(f"Starting parallel upload of {total_files} files")

        with ThreadPoolExecutor(max_workers=total_files) as pool:
            futures = [pool.submit(self.executor.upload_file, task) for task in upload_tasks]
            # ワーカー内の予期しない例外はここで呼び出し元に伝播する
            return [future.result() for future in futures]

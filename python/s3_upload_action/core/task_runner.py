"""アップロードタスクの実行"""
from dataclasses import dataclass
from typing import List, Optional

from ..exceptions import NoFilesError, UploadError
from ..models.config import Config
from ..utils.logger import LoggerManager
from ..utils.file_utils import ContentTypeResolver, FileInfo, FileScanner
from .key_mapper import KeyMapper
from .uploader import UploadExecutor, ParallelUploadExecutor, UploadResult, UploadTask
from .s3_client import S3ClientManager


@dataclass
class RunReport:
    """実行結果"""
    object_key: str
    object_locations: List[str]


class TaskRunner:
    """ファイルの列挙からアップロードまでを実行"""

    def __init__(self, config: Config, s3_client=None):
        self.config = config
        self.logger = LoggerManager.get_logger()

        # S3クライアントとアップローダーを初期化
        self.client_manager = S3ClientManager(config.aws)
        self.s3_client = s3_client if s3_client is not None else self.client_manager.get_client()
        self.executor = UploadExecutor(self.s3_client, config.options, self.locate)
        self.parallel_executor = ParallelUploadExecutor(self.executor)
        self.file_scanner = FileScanner(config.working_dir)
        self.content_types = ContentTypeResolver(config.options.default_content_type)

    def locate(self, bucket: str, key: str) -> str:
        return self.client_manager.object_location(bucket, key, self.s3_client.meta.endpoint_url)

    def collect_files(self) -> List[FileInfo]:
        """アップロード対象ファイルを列挙"""
        source = self.config.source
        if source.uses_directory:
            files = self.file_scanner.scan_directory(source.source_dir)
        elif source.source_files:
            files = self.file_scanner.scan_patterns(source.source_files)
        else:
            files = []

        if not files:
            raise NoFilesError("No files to upload")
        return files

    def source_root(self) -> Optional[str]:
        source = self.config.source
        if source.uses_directory:
            return self.file_scanner.resolve_directory(source.source_dir)
        return None

    def build_tasks(self, files: List[FileInfo]) -> List[UploadTask]:
        """ファイルごとにキーとContent-Typeを決定"""
        mapper = KeyMapper(self.config.source.destination_dir, self.source_root())
        return [
            UploadTask(
                file_info=file_info,
                bucket=self.config.source.bucket,
                key=mapper.key_for(file_info),
                content_type=self.content_types.resolve(file_info.path),
            )
            for file_info in files
        ]

    def run(self) -> RunReport:
        """全ファイルをアップロード"""
        files = self.collect_files()
        tasks = self.build_tasks(files)
        total_bytes = sum(task.file_info.size for task in tasks)
        self.logger.info(
            f"Uploading {len(tasks)} files ({total_bytes} bytes) to bucket {self.config.source.bucket}"
        )

        results = self.parallel_executor.upload_files(tasks)
        self._raise_on_failure(results)

        return RunReport(
            object_key=self.config.source.destination_dir,
            object_locations=[result.location for result in results],
        )

    def _raise_on_failure(self, results: List[UploadResult]) -> None:
        failed = [result for result in results if not result.success]
        if not failed:
            return
        self.logger.error(
            f"Upload completed: {len(results) - len(failed)} successful, {len(failed)} failed"
        )
        raise UploadError(failed[0].error)

"""S3 Upload Action パッケージ"""
from typing import Mapping, Optional
from .models.config import Config
from .utils.actions import ActionOutputs
from .utils.logger import LoggerManager
from .core.task_runner import RunReport, TaskRunner


class S3UploadAction:
    """アクションのメインクラス"""

    def __init__(self, config: Config, outputs: Optional[ActionOutputs] = None, s3_client=None):
        self.config = config

        # ロガーをセットアップ
        self.logger = LoggerManager.setup(self.config.logging)

        self.outputs = outputs or ActionOutputs()
        self.task_runner = TaskRunner(self.config, s3_client=s3_client)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'S3UploadAction':
        return cls(Config.from_env(environ), outputs=ActionOutputs(environ))

    def run(self) -> RunReport:
        """アップロードを実行して結果を出力"""
        report = self.task_runner.run()

        self.logger.info(f"object key - {report.object_key}")
        self.logger.info(f"object locations - {','.join(report.object_locations)}")
        self.outputs.set_output("object_key", report.object_key)
        self.outputs.set_output("object_locations", report.object_locations)
        return report


__all__ = ['S3UploadAction', 'Config', 'RunReport']

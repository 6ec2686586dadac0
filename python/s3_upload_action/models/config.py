"""設定管理用のデータクラス"""
from dataclasses import dataclass, field
from typing import List, Mapping, Optional
import os
import uuid

from ..exceptions import ConfigurationError
from ..utils.actions import ActionInputs


# destination_dir にこの値が指定された場合はランダムIDに置き換える
ROOT_DESTINATION = "/"


def generate_object_prefix() -> str:
    """短いランダムIDを生成"""
    return uuid.uuid4().hex[:10]


def resolve_destination_dir(value: str) -> str:
    """destination_dir を解決"""
    if value == ROOT_DESTINATION:
        return generate_object_prefix()
    return value


def split_patterns(value: str) -> List[str]:
    """改行区切りのパターン入力を分割"""
    return [line.strip() for line in value.split("\n") if line.strip()]


@dataclass
class LoggingConfig:
    """ロギング設定"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"
    annotations: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'LoggingConfig':
        """ランナーの環境変数から作成"""
        environ = os.environ if environ is None else environ
        return cls(
            level="DEBUG" if environ.get("RUNNER_DEBUG") == "1" else "INFO",
            annotations=environ.get("GITHUB_ACTIONS") == "true",
        )


@dataclass
class AWSConfig:
    """AWS関連の設定"""
    access_key_id: str
    secret_access_key: str
    region: Optional[str] = None
    endpoint: Optional[str] = None

    def __post_init__(self):
        if not self.access_key_id:
            raise ConfigurationError("access_key_id cannot be empty")
        if not self.secret_access_key:
            raise ConfigurationError("secret_access_key cannot be empty")
        # 空文字は未指定として扱う
        self.region = self.region or None
        self.endpoint = self.endpoint or None
        # スキームのないホスト名は https とみなす
        if self.endpoint and "://" not in self.endpoint:
            self.endpoint = f"https://{self.endpoint}"


@dataclass
class SourceConfig:
    """アップロード元と宛先の設定"""
    bucket: str
    source_dir: Optional[str] = None
    source_files: List[str] = field(default_factory=list)
    destination_dir: str = ""

    def __post_init__(self):
        if not self.bucket:
            raise ConfigurationError("bucket cannot be empty")
        self.source_dir = self.source_dir or None

    @property
    def uses_directory(self) -> bool:
        """ディレクトリモードかどうか（パターンより優先）"""
        return self.source_dir is not None


@dataclass
class UploadOptions:
    """アップロードオプション"""
    multipart_threshold: int = 8 * 1024 * 1024  # 8MB
    multipart_chunksize: int = 8 * 1024 * 1024  # 8MB
    max_concurrency: int = 4  # ファイルごとの転送スレッド数
    use_threads: bool = True
    default_content_type: str = "text/plain"


@dataclass
class Config:
    """メイン設定クラス"""
    logging: LoggingConfig
    aws: AWSConfig
    source: SourceConfig
    options: UploadOptions = field(default_factory=UploadOptions)
    working_dir: str = field(default_factory=os.getcwd)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Config':
        """アクション入力から読み込み"""
        inputs = ActionInputs(environ)

        aws_config = AWSConfig(
            access_key_id=inputs.get("aws_key_id", required=True),
            secret_access_key=inputs.get("aws_secret_access_key", required=True),
            region=inputs.get("aws_region"),
            endpoint=inputs.get("endpoint"),
        )
        source_config = SourceConfig(
            bucket=inputs.get("aws_bucket", required=True),
            source_dir=inputs.get("source_dir"),
            source_files=split_patterns(inputs.get("source_files")),
            destination_dir=resolve_destination_dir(inputs.get("destination_dir")),
        )

        return cls(
            logging=LoggingConfig.from_env(environ),
            aws=aws_config,
            source=source_config,
        )

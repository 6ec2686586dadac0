"""S3クライアント管理"""
import boto3
from typing import Dict, Any
from urllib.parse import quote, urlsplit
from botocore.config import Config as BotoConfig
from botocore.exceptions import NoCredentialsError
from ..models.config import AWSConfig
from ..utils.logger import LoggerManager


def build_location(endpoint_url: str, bucket: str, key: str, path_style: bool = False) -> str:
    """アップロード先オブジェクトのURLを組み立てる"""
    quoted_key = quote(key, safe="/~")
    parts = urlsplit(endpoint_url)
    # ドットを含むバケット名は仮想ホスト形式だと証明書と一致しない
    if path_style or "." in bucket:
        return f"{parts.scheme}://{parts.netloc}{parts.path.rstrip('/')}/{bucket}/{quoted_key}"
    return f"{parts.scheme}://{bucket}.{parts.netloc}/{quoted_key}"


class S3ClientManager:
    """S3クライアントの作成と管理"""

    def __init__(self, aws_config: AWSConfig):
        self.aws_config = aws_config
        self.logger = LoggerManager.get_logger()
        self._client = None

    @property
    def uses_custom_endpoint(self) -> bool:
        return self.aws_config.endpoint is not None

    def get_client(self):
        """S3クライアントを取得（必要に応じて作成）"""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def client_kwargs(self) -> Dict[str, Any]:
        """boto3.client に渡す引数"""
        kwargs: Dict[str, Any] = {
            'aws_access_key_id': self.aws_config.access_key_id,
            'aws_secret_access_key': self.aws_config.secret_access_key,
        }
        if self.aws_config.region:
            kwargs['region_name'] = self.aws_config.region
        if self.uses_custom_endpoint:
            # S3互換ストレージはパス形式でアクセス
            kwargs['endpoint_url'] = self.aws_config.endpoint
            kwargs['config'] = BotoConfig(s3={'addressing_style': 'path'})
        return kwargs

    def _create_client(self):
        """S3クライアントを作成"""
        try:
            s3_client = boto3.client('s3', **self.client_kwargs())
        except NoCredentialsError:
            self.logger.error("AWS credentials not available.")
            raise
        except Exception as e:
            self.logger.error(f"Error creating S3 client: {e}")
            raise

        if self.uses_custom_endpoint:
            self.logger.info(f"S3 client created for endpoint {self.aws_config.endpoint}.")
        else:
            self.logger.info("S3 client created with supplied credentials.")
        return s3_client

    def object_location(self, bucket: str, key: str, endpoint_url: str) -> str:
        """オブジェクトのURL"""
        return build_location(endpoint_url, bucket, key, path_style=self.uses_custom_endpoint)

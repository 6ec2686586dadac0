#!/usr/bin/env python3
"""S3 Upload Action - エントリーポイント"""
import sys

from s3_upload_action import S3UploadAction
from s3_upload_action.exceptions import ActionError
from s3_upload_action.models.config import LoggingConfig
from s3_upload_action.utils.actions import set_failed
from s3_upload_action.utils.logger import LoggerManager


def main(environ=None) -> int:
    """メイン関数"""
    logger = LoggerManager.setup(LoggingConfig.from_env(environ))

    try:
        action = S3UploadAction.from_env(environ)
        action.run()
    except ActionError as e:
        return set_failed(logger, str(e))
    except Exception as e:
        return set_failed(logger, f"Unexpected error: {e}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

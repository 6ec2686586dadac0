"""CIランナーとの入出力"""
import json
import logging
import os
import sys
import uuid
from typing import Any, Mapping, Optional, TextIO

from ..exceptions import ConfigurationError


class ActionInputs:
    """INPUT_<NAME> 環境変数からアクション入力を読み取る"""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ

    @staticmethod
    def env_name(name: str) -> str:
        return f"INPUT_{name.replace(' ', '_').upper()}"

    def get(self, name: str, required: bool = False) -> str:
        """入力値を取得（前後の空白は除去）"""
        value = self.environ.get(self.env_name(name), "").strip()
        if required and not value:
            raise ConfigurationError(f"Input required and not supplied: {name}")
        return value


class ActionOutputs:
    """ステップ出力の書き込み"""

    def __init__(self, environ: Optional[Mapping[str, str]] = None, stream: Optional[TextIO] = None):
        self.environ = os.environ if environ is None else environ
        self.stream = stream

    @staticmethod
    def _to_text(value: Any) -> str:
        if isinstance(value, str):
            return value
        return json.dumps(value)

    def set_output(self, name: str, value: Any) -> None:
        """出力を設定"""
        text = self._to_text(value)
        output_file = self.environ.get("GITHUB_OUTPUT")

        if output_file:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            with open(output_file, "a", encoding="utf-8") as file:
                file.write(f"{name}<<{delimiter}\n{text}\n{delimiter}\n")
            return

        # 出力ファイルがない場合は旧形式のコマンドで出力
        stream = self.stream or sys.stdout
        stream.write(f"::set-output name={name}::{escape_data(text)}\n")
        stream.flush()


def escape_data(text: str) -> str:
    """ワークフローコマンド用のエスケープ"""
    return text.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def set_failed(logger: logging.Logger, message: str) -> int:
    """エラーを出力して失敗時の終了コードを返す"""
    logger.error(message)
    return 1

"""S3オブジェクトキーの決定"""
import os
import posixpath
from typing import Optional

from ..utils.file_utils import FileInfo


def to_posix(path: str, sep: Optional[str] = None) -> str:
    """区切り文字を / に統一"""
    sep = sep or os.sep
    return path.replace(sep, "/") if sep != "/" else path


def join_key(prefix: str, relative: str) -> str:
    """プレフィックスと相対パスを結合して正規化"""
    joined = posixpath.join(to_posix(prefix), to_posix(relative)) if prefix else to_posix(relative)
    key = posixpath.normpath(joined)
    # normpath は先頭の // を残すため1つにまとめる
    if key.startswith("//"):
        key = "/" + key.lstrip("/")
    return key


class KeyMapper:
    """ファイルごとの宛先キーを計算

    source_root が指定されていればその相対パス、なければファイル名を使う。
    """

    def __init__(self, destination_dir: str, source_root: Optional[str] = None):
        self.destination_dir = destination_dir
        self.source_root = source_root

    def relative_component(self, file_info: FileInfo) -> str:
        if self.source_root:
            return os.path.relpath(file_info.path, self.source_root)
        return file_info.name

    def key_for(self, file_info: FileInfo) -> str:
        return join_key(self.destination_dir, self.relative_component(file_info))

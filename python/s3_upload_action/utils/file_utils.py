"""ファイル操作関連のユーティリティ"""
import glob
import mimetypes
import os
from typing import Dict, Iterable, List, Optional
from dataclasses import dataclass

from ..exceptions import PatternError, SourceError
from .logger import LoggerManager


# インタプリタの既定表に無い、または異なる拡張子
EXTRA_CONTENT_TYPES = {
    ".md": "text/markdown",
    ".markdown": "text/markdown",
    ".webp": "image/webp",
    ".woff": "font/woff",
    ".woff2": "font/woff2",
    ".yaml": "text/yaml",
    ".yml": "text/yaml",
}


@dataclass
class FileInfo:
    """ファイル情報"""
    path: str
    size: int

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    @classmethod
    def from_path(cls, file_path: str) -> 'FileInfo':
        return cls(path=file_path, size=os.path.getsize(file_path))


class ContentTypeResolver:
    """拡張子からContent-Typeを決定"""

    def __init__(self, default: str = "text/plain", extra: Optional[Dict[str, str]] = None):
        self.default = default
        # システムのmime.typesに依存しないよう独立したテーブルを使う
        self._types = mimetypes.MimeTypes()
        for ext, content_type in (extra if extra is not None else EXTRA_CONTENT_TYPES).items():
            self._types.add_type(content_type, ext)

    def resolve(self, file_path: str) -> str:
        content_type, _ = self._types.guess_type(os.path.basename(file_path), strict=False)
        return content_type or self.default


def validate_pattern(pattern: str) -> None:
    """globパターンの構文をチェック"""
    if "\x00" in pattern:
        raise PatternError(f"Invalid pattern '{pattern}': contains a null byte")

    i, n = 0, len(pattern)
    while i < n:
        if pattern[i] != "[":
            i += 1
            continue
        j = i + 1
        if j < n and pattern[j] == "!":
            j += 1
        # 先頭の ] は文字クラスの要素
        if j < n and pattern[j] == "]":
            j += 1
        while j < n and pattern[j] != "]":
            j += 1
        if j >= n:
            raise PatternError(f"Invalid pattern '{pattern}': unterminated character class")
        i = j + 1

    for segment in pattern.replace(os.sep, "/").split("/"):
        if "**" in segment and segment != "**":
            raise PatternError(f"Invalid pattern '{pattern}': '**' must be a whole path segment")


class FileScanner:
    """ファイルスキャン機能"""

    def __init__(self, base_dir: Optional[str] = None):
        self.base_dir = os.path.abspath(base_dir or os.getcwd())
        self.logger = LoggerManager.get_logger()

    def resolve_directory(self, directory: str) -> str:
        """作業ディレクトリ基準で絶対パスに変換"""
        return os.path.abspath(os.path.join(self.base_dir, os.path.expanduser(directory)))

    def scan_directory(self, directory: str) -> List[FileInfo]:
        """ディレクトリを再帰的にスキャン（ディレクトリ自体は含めない）"""
        root_dir = self.resolve_directory(directory)
        if not os.path.isdir(root_dir):
            raise SourceError(f"Source directory not found: {directory}")

        files = []
        for root, dirs, names in os.walk(root_dir):
            dirs.sort()
            for name in sorted(names):
                file_path = os.path.join(root, name)
                if os.path.isfile(file_path):
                    files.append(FileInfo.from_path(file_path))

        self.logger.debug(f"Found {len(files)} files in {root_dir}")
        return files

    def match_pattern(self, pattern: str) -> List[str]:
        """単一パターンに一致する通常ファイルの絶対パス"""
        validate_pattern(pattern)
        expanded = os.path.expanduser(pattern)
        if not os.path.isabs(expanded):
            expanded = os.path.join(glob.escape(self.base_dir), expanded)
        return [
            os.path.abspath(path)
            for path in glob.glob(expanded, recursive=True)
            if os.path.isfile(path)
        ]

    def scan_patterns(self, patterns: Iterable[str]) -> List[FileInfo]:
        """パターン群に一致するファイルを重複なしで収集"""
        patterns = list(patterns)
        for pattern in patterns:
            validate_pattern(pattern)

        matched = set()
        for pattern in patterns:
            paths = self.match_pattern(pattern)
            if not paths:
                self.logger.warning(f"No files were found with the provided path: {pattern}")
                continue
            self.logger.debug(f"Pattern '{pattern}' matched {len(paths)} files")
            matched.update(paths)

        return [FileInfo.from_path(path) for path in sorted(matched)]

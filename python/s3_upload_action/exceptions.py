"""アクションの例外定義"""


class ActionError(Exception):
    """実行を失敗させるエラーの基底クラス"""
    pass


class ConfigurationError(ActionError, ValueError):
    """必須入力の欠落など設定の不備"""
    pass


class SourceError(ActionError):
    """アップロード元ディレクトリが存在しない"""
    pass


class PatternError(ActionError, ValueError):
    """globパターンの構文エラー"""
    pass


class NoFilesError(ActionError):
    """アップロード対象ファイルが1件もない"""
    pass


class UploadError(ActionError):
    """1件以上のアップロードが失敗した"""
    pass

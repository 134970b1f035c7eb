"""jastylelint
日本語文章のスタイル・文法診断ライブラリ。

主な提供機能:
- 表記ゆれ（送り仮名・全角半角・数字・日付など）の検出
- 文体混在・ら抜き言葉・二重否定・冗長表現などの文法/文体チェック
- Markdown 文書の構造チェック（見出し・表・コードブロック）
- 変更通知つきの設定ストアと、NG例コーパスによる評価ハーネス
- CLI インターフェース

形態素解析器(fugashi/janome)があればトークン依存のルールも動作する。
"""
from .checker import FileReport, check_file, check_paths, check_text
from .config import ConfigError, ConfigurationStore, RulesConfig
from .manager import RulesManager
from .models import Diagnostic, RuleCode, Sentence, Token

__all__ = [
    "check_text",
    "check_file",
    "check_paths",
    "FileReport",
    "RulesManager",
    "RulesConfig",
    "ConfigurationStore",
    "ConfigError",
    "Diagnostic",
    "RuleCode",
    "Sentence",
    "Token",
]

__version__ = "0.1.0"

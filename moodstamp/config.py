"""
config.py - 設定値・スタンプ定義
MoodStamp v0.1
"""

import json
import os
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# アプリ定数
# ---------------------------------------------------------------------------

APP_TITLE = "MoodStamp"
APP_VERSION = "0.1.0"

LOG_LEVEL = os.environ.get("MOODSTAMP_LOG_LEVEL", "INFO").upper()

# 同一ユーザーの同種スタンプを 1 件に畳むか（既定: 畳まない）
DEDUP_BY_REACTOR = os.environ.get("MOODSTAMP_DEDUP_BY_REACTOR", "").lower() in (
    "1",
    "true",
    "yes",
)

# ---------------------------------------------------------------------------
# スタンプ定義（表示用）
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StampConfig:
    glyph: str
    label: str


StampConfigMap = dict[str, StampConfig]

STAMP_CONFIG: StampConfigMap = {
    "thanks": StampConfig("😢", "ありがとうボタン"),
    "love": StampConfig("🥰", "大好きボタン"),
    "smile": StampConfig("😁", "笑顔ボタン"),
    "cry": StampConfig("😭", "号泣ボタン"),
    "sad": StampConfig("🥺", "悲しいボタン"),
    "shock": StampConfig("😱", "ショックボタン"),
}

# テスト・デモ用（happy / sad）
FIXTURE_STAMP_CONFIG: StampConfigMap = {
    **STAMP_CONFIG,
    "happy": StampConfig("😊", "うれしいボタン"),
    "sad": StampConfig("😢", "悲しいボタン"),
}


def load_stamp_config(path: str) -> StampConfigMap:
    """
    JSON ファイルからスタンプ定義を読み込む。
    形式: {"thanks": {"glyph": "😢", "label": "..."}, ...}
    """
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, dict):
        raise ValueError(f"Stamp config must be an object: {path}")
    config: StampConfigMap = {}
    for stamp_type, entry in raw.items():
        try:
            config[stamp_type] = StampConfig(
                glyph=entry["glyph"], label=entry.get("label", stamp_type)
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise ValueError(f"Invalid stamp entry '{stamp_type}': {e}") from e
    return config


def get_stamp_config() -> StampConfigMap:
    """MOODSTAMP_STAMP_CONFIG が指定されていればそのファイルを優先する。"""
    path = os.environ.get("MOODSTAMP_STAMP_CONFIG")
    if path:
        return load_stamp_config(path)
    return STAMP_CONFIG


# ---------------------------------------------------------------------------
# カラーパレット
# ---------------------------------------------------------------------------

COLOR_BG = "#F0F2F5"  # 背景
COLOR_CARD = "#FFFFFF"  # カード背景
COLOR_BORDER = "#D0D7DE"  # ボーダー
COLOR_TEXT_MUTED = "#656D76"  # 薄いテキスト
COLOR_TEXT_MAIN = "#1F2328"  # メインテキスト
COLOR_PRIMARY = "#0969DA"  # プライマリ（青）
COLOR_REACTED_BG = "#EAF2FF"  # 自分が押したスタンプ

# UI 定数
BORDER_RADIUS_CARD = 10
BORDER_RADIUS_CHIP = 12
STAMP_COUNT_CAP = 99

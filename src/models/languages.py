"""支持的语言代码及显示名称."""

from typing import Dict, List

AUTO_DETECT = "auto"

# 语言代码与显示名称映射, 顺序即界面下拉框顺序
LANGUAGE_OPTIONS: Dict[str, str] = {
    AUTO_DETECT: "Auto-detect",
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "zh": "Chinese",
    "ja": "Japanese",
    "ru": "Russian",
    "ko": "Korean",
    "it": "Italian",
    "pt": "Portuguese",
    "ar": "Arabic",
    "hi": "Hindi",
    "bn": "Bengali",
    "pa": "Punjabi",
    "vi": "Vietnamese",
    "tr": "Turkish",
    "fa": "Persian",
    "nl": "Dutch",
    "pl": "Polish",
}


def get_language_label(code: str) -> str:
    """语言代码转换为显示名称, 未知代码原样返回."""
    return LANGUAGE_OPTIONS.get(code, code)


def is_valid_source_language(code: str) -> bool:
    """源语言可以是任意已支持的代码, 包括 auto."""
    return code in LANGUAGE_OPTIONS


def is_valid_target_language(code: str) -> bool:
    """目标语言不能是 auto."""
    return code in LANGUAGE_OPTIONS and code != AUTO_DETECT


def source_language_codes() -> List[str]:
    return list(LANGUAGE_OPTIONS)


def target_language_codes() -> List[str]:
    return [code for code in LANGUAGE_OPTIONS if code != AUTO_DETECT]

"""
플러그인 언어 파일 모듈

내장 영어 번들과 사용자 번들을 병합하여 메시지를 제공하고,
사용자 번들에 빠진 키를 점검하는 기능을 제공합니다.
"""

from .bundle import Bundle, load_bundle, bundle_format_for
from .colors import color, color_list, strip_color, to_ansi, translate_alternate_color_codes
from .config import Config, load_plugin_config, resolve_plugin_config
from .context import PluginContext, read_packaged_resource
from .language import Language, load_messages
from .utils.exceptions import LanguageError, BundleFormatError, BundleLoadError, InvalidKeyError
from .utils.text_utils import format_time

__all__ = [
    # 번들
    'Bundle',
    'load_bundle',
    'bundle_format_for',

    # 언어
    'Language',
    'load_messages',
    'PluginContext',
    'read_packaged_resource',

    # 설정
    'Config',
    'load_plugin_config',
    'resolve_plugin_config',

    # 색상 / 유틸리티
    'color',
    'color_list',
    'strip_color',
    'to_ansi',
    'translate_alternate_color_codes',
    'format_time',

    # 예외
    'LanguageError',
    'BundleFormatError',
    'BundleLoadError',
    'InvalidKeyError',
]

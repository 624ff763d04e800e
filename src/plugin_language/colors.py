# -*- coding: utf-8 -*-
"""채팅 색상 코드 변환"""

import re
from typing import List

# 게임 클라이언트가 사용하는 색상 코드 접두 문자
COLOR_CHAR = "§"
ALT_COLOR_CHAR = "&"

# 색상(0-9, a-f), 서식(k-o), 초기화(r), 16진 색상(x)
COLOR_CODES = "0123456789AaBbCcDdEeFfKkLlMmNnOoRrXx"

_ALT_CODE_PATTERN = re.compile(
    re.escape(ALT_COLOR_CHAR) + "([" + COLOR_CODES + "])")
_STRIP_PATTERN = re.compile(
    re.escape(COLOR_CHAR) + "[0-9A-FK-ORX]", re.IGNORECASE)
# '§x§R§R§G§G§B§B' 16진 색상 또는 단일 코드
_NATIVE_CODE_PATTERN = re.compile(
    re.escape(COLOR_CHAR) + "x(?P<hex>(?:" + re.escape(COLOR_CHAR) + "[0-9a-f]){6})"
    + "|" + re.escape(COLOR_CHAR) + "(?P<code>[0-9a-fk-orx])",
    re.IGNORECASE)


class ANSIColors:
    """ANSI 색상 코드 상수"""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    ITALIC = "\033[3m"
    UNDERLINE = "\033[4m"
    BLINK = "\033[5m"
    STRIKETHROUGH = "\033[9m"

    # 전경색
    BLACK = "\033[30m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"

    # 밝은 전경색
    BRIGHT_BLACK = "\033[90m"
    BRIGHT_RED = "\033[91m"
    BRIGHT_GREEN = "\033[92m"
    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_BLUE = "\033[94m"
    BRIGHT_MAGENTA = "\033[95m"
    BRIGHT_CYAN = "\033[96m"
    BRIGHT_WHITE = "\033[97m"

    @staticmethod
    def rgb(red: int, green: int, blue: int) -> str:
        """24비트 전경색"""
        return f"\033[38;2;{red};{green};{blue}m"


# 게임 색상 코드 -> ANSI 시퀀스
ANSI_BY_CODE = {
    '0': ANSIColors.BLACK,
    '1': ANSIColors.BLUE,
    '2': ANSIColors.GREEN,
    '3': ANSIColors.CYAN,
    '4': ANSIColors.RED,
    '5': ANSIColors.MAGENTA,
    '6': ANSIColors.YELLOW,
    '7': ANSIColors.WHITE,
    '8': ANSIColors.BRIGHT_BLACK,
    '9': ANSIColors.BRIGHT_BLUE,
    'a': ANSIColors.BRIGHT_GREEN,
    'b': ANSIColors.BRIGHT_CYAN,
    'c': ANSIColors.BRIGHT_RED,
    'd': ANSIColors.BRIGHT_MAGENTA,
    'e': ANSIColors.BRIGHT_YELLOW,
    'f': ANSIColors.BRIGHT_WHITE,
    'k': ANSIColors.BLINK,
    'l': ANSIColors.BOLD,
    'm': ANSIColors.STRIKETHROUGH,
    'n': ANSIColors.UNDERLINE,
    'o': ANSIColors.ITALIC,
    'r': ANSIColors.RESET,
    # 6자리가 갖춰지지 않은 16진 표기는 출력하지 않음
    'x': '',
}


def translate_alternate_color_codes(text: str, alt_char: str = ALT_COLOR_CHAR) -> str:
    """
    대체 색상 문자(&)로 표기된 코드를 게임 색상 코드로 변환

    '&a' -> '§a' 처럼 코드 문자는 소문자로 정규화됩니다.
    코드 문자가 뒤따르지 않는 '&' 는 그대로 남습니다.

    Args:
        text: 변환할 텍스트
        alt_char: 대체 색상 문자

    Returns:
        str: 변환된 텍스트
    """
    if alt_char == ALT_COLOR_CHAR:
        pattern = _ALT_CODE_PATTERN
    else:
        pattern = re.compile(re.escape(alt_char) + "([" + COLOR_CODES + "])")
    return pattern.sub(lambda m: COLOR_CHAR + m.group(1).lower(), text)


def color(message: str) -> str:
    """'&' 색상 코드 변환"""
    return translate_alternate_color_codes(message)


def color_list(messages: List[str]) -> List[str]:
    """리스트의 각 요소를 순서대로 변환한 새 리스트 반환"""
    return [color(message) for message in messages]


def strip_color(text: str) -> str:
    """게임 색상 코드 제거"""
    return _STRIP_PATTERN.sub('', text)


def to_ansi(text: str) -> str:
    """
    게임 색상 코드를 ANSI 시퀀스로 변환 (콘솔/텔넷 출력용)

    '§x§R§R§G§G§B§B' 형태의 16진 색상은 24비트 ANSI 색상 하나로 변환하고,
    하나라도 변환되었다면 끝에 RESET을 붙입니다.
    """
    rendered = []

    def _replace(match) -> str:
        rendered.append(match.group(0))
        if match.group('hex'):
            digits = match.group('hex').replace(COLOR_CHAR, '')
            red, green, blue = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
            return ANSIColors.rgb(red, green, blue)
        return ANSI_BY_CODE[match.group('code').lower()]

    result = _NATIVE_CODE_PATTERN.sub(_replace, text)
    if rendered:
        result += ANSIColors.RESET
    return result

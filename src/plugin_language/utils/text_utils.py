# -*- coding: utf-8 -*-
"""문자열 관련 유틸리티"""


def format_time(seconds: int) -> str:
    """
    초를 'MM:SS' 형식으로 변환

    분은 59를 넘을 수 있습니다 (예: 3725 -> '62:05').

    Args:
        seconds: 초 (0 이상)

    Returns:
        str: 포맷된 시간 문자열
    """
    minutes, sec = divmod(int(seconds), 60)
    return f"{minutes:02d}:{sec:02d}"

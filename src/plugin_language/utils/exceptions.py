# -*- coding: utf-8 -*-
"""
언어 번들 로딩에서 사용될 커스텀 예외 클래스를 정의합니다.
"""

class LanguageError(Exception):
    """언어 모듈의 기본이 되는 예외 클래스입니다."""
    pass

class BundleFormatError(LanguageError):
    """번들 파일을 해석할 수 없을 때 발생하는 예외입니다."""
    pass

class BundleLoadError(LanguageError):
    """패키지에 포함된 기본 번들을 읽지 못했을 때 발생하는 예외입니다."""
    pass

class InvalidKeyError(LanguageError, KeyError):
    """기본 번들에도 존재하지 않는 키를 요청했을 때 발생하는 예외입니다."""

    def __init__(self, path: str, kind: str = "string"):
        self.path = path
        self.kind = kind
        super().__init__(f"The language key '{path}' is not a valid {kind}!")

    def __str__(self) -> str:
        return self.args[0]

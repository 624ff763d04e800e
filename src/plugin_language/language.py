# -*- coding: utf-8 -*-
"""
언어 파일 관리 - 기본(영어) 번들과 사용자 번들을 병합하여 메시지 제공
"""

from typing import Any, Callable, List, Mapping, Optional, TypeVar

from .bundle import Bundle, bundle_format_for, load_bundle
from .colors import strip_color, translate_alternate_color_codes
from .context import PluginContext
from .utils.exceptions import BundleFormatError, BundleLoadError, InvalidKeyError

T = TypeVar('T')

CONFIGURATION_KEY = "languageFile"
DEFAULT_LANGUAGE_RESOURCE = "language/lang_en.yml"
DEFAULT_ALIASES = ('default', 'default.yml')
LANGUAGE_DIR = "language"


class Language:
    """
    언어 번들 로더 겸 메시지 조회기

    생성 시 한 번만 파일을 읽습니다. 사용자 번들에 문제가 있으면
    경고를 남기고 기본 번들을 사용하며, 이후에는 읽기 전용입니다.
    """

    def __init__(self, context: PluginContext, config: Optional[Mapping[str, Any]] = None,
                 translate: Callable[[str], str] = translate_alternate_color_codes):
        """
        Language 초기화

        Args:
            context: 로거, 내장 리소스 리더, 데이터 디렉토리
            config: 플러그인 설정 ('languageFile' 키 사용)
            translate: 색상 코드 변환 함수

        Raises:
            BundleLoadError: 내장 기본 번들을 읽을 수 없는 경우
        """
        self.context = context
        self.log = context.log
        self.translate = translate
        self.language_file = None

        self.default_language = self._load_default_language()
        self.language = self._load_language((config or {}).get(CONFIGURATION_KEY))

        self.prefix = self.get_string("prefix")
        self.name = self.get_string("name")
        self.plain_prefix = strip_color(self.prefix)
        self.plain_name = strip_color(self.name)
        # bStats 등에서 알 수 없는 게임에 붙이는 이름
        self.default_name = self.translate(self.default_language.get_string("name", "undefined"))
        self.default_plain_name = strip_color(self.default_name)

    def _load_default_language(self) -> Bundle:
        """내장 기본 번들 로드"""
        try:
            text = self.context.read_embedded_resource(DEFAULT_LANGUAGE_RESOURCE)
            return Bundle.from_text(text, bundle_format_for(DEFAULT_LANGUAGE_RESOURCE),
                                    source=DEFAULT_LANGUAGE_RESOURCE)
        except (OSError, BundleFormatError) as e:
            self.log.error(f"기본 언어 파일 로드 실패 ('{DEFAULT_LANGUAGE_RESOURCE}'): {e}")
            raise BundleLoadError(
                f"Failed to load default language file '{DEFAULT_LANGUAGE_RESOURCE}'") from e

    def _load_language(self, file_name: Any) -> Bundle:
        """
        설정값에 따라 사용할 번들 결정

        'default' / 'default.yml' 은 내장 기본 번들을,
        'lang_xx.yml' 은 데이터 디렉토리의 language 폴더에서 파일을 찾습니다.
        실패하면 항상 기본 번들로 돌아갑니다.
        """
        if isinstance(file_name, str) and file_name.lower() in DEFAULT_ALIASES:
            return self.default_language

        if not isinstance(file_name, str) or bundle_format_for(file_name) is None:
            self.log.warning(
                f"언어 파일이 지정되지 않았거나 올바르지 않음: {file_name!r} "
                f"(설정 키 '{CONFIGURATION_KEY}', 확장자 .yml/.yaml/.json 필요). 기본 파일을 사용합니다.")
            return self.default_language

        language_file = self.context.data_dir / LANGUAGE_DIR / file_name
        if not language_file.is_file():
            self.log.warning(
                f"{CONFIGURATION_KEY} = {file_name} 설정이 존재하지 않는 파일을 가리킴: "
                f"{language_file}. 기본 파일을 사용합니다.")
            return self.default_language

        try:
            language = load_bundle(language_file)
        except (OSError, BundleFormatError) as e:
            self.log.warning(f"언어 파일 '{file_name}' 오류, 기본 파일을 사용합니다: {e}")
            return self.default_language

        self.language_file = language_file
        self.log.info(f"언어 파일 로드: {language_file}")
        return language

    @property
    def is_default(self) -> bool:
        """사용 중인 번들이 내장 기본 번들 자체인지 여부"""
        return self.language is self.default_language

    def get_string(self, path: str, color: bool = True) -> str:
        """
        메시지 조회

        사용자 번들에 문자열이 없으면 기본 번들의 값을 사용합니다.

        Args:
            path: 메시지 키 경로
            color: 색상 코드 변환 여부

        Returns:
            str: 메시지

        Raises:
            InvalidKeyError: 기본 번들에도 문자열이 없는 경우
        """
        message = self.language.get_string(path)
        if message is None:
            message = self.default_language.get_string(path)
            if message is None:
                raise InvalidKeyError(path, "string")

        return self.translate(message) if color else message

    def get_string_list(self, path: str, color: bool = True) -> List[str]:
        """
        리스트 메시지 조회 (get_string 과 같은 폴백 규칙)

        Raises:
            InvalidKeyError: 기본 번들에도 리스트가 없는 경우
        """
        messages = self.language.get_string_list(path)
        if messages is None:
            messages = self.default_language.get_string_list(path)
            if messages is None:
                raise InvalidKeyError(path, "list")

        if color:
            return [self.translate(message) for message in messages]
        return messages

    def find_missing_string_keys(self) -> List[str]:
        """기본 번들에는 문자열이 있지만 사용자 번들에는 없는 키 목록"""
        return self._find_missing(Bundle.is_string)

    def find_missing_list_keys(self) -> List[str]:
        """기본 번들에는 리스트가 있지만 사용자 번들에는 없는 키 목록"""
        return self._find_missing(Bundle.is_list)

    def _find_missing(self, has_type: Callable[[Bundle, str], bool]) -> List[str]:
        if self.is_default:
            return []

        return [
            key for key in self.default_language.keys(deep=True)
            if has_type(self.default_language, key) and not has_type(self.language, key)
        ]

    def extract(self, extractor: Callable[['Language'], T]) -> T:
        """호출자 전용 메시지 추출 함수 적용"""
        return extractor(self)


def load_messages(context: PluginContext, config: Optional[Mapping[str, Any]],
                  extractor: Callable[[Language], T],
                  translate: Callable[[str], str] = translate_alternate_color_codes) -> T:
    """
    Language 를 만든 뒤 메시지 추출 함수에 넘겨 결과 반환 (편의 함수)

    Args:
        context: 플러그인 실행 환경
        config: 플러그인 설정
        extractor: Language -> 메시지 객체
        translate: 색상 코드 변환 함수

    Returns:
        extractor 의 반환값
    """
    return Language(context, config, translate).extract(extractor)

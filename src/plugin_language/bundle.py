# -*- coding: utf-8 -*-
"""
메시지 번들 - 점(.)으로 구분된 키 경로로 접근하는 계층형 문서
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional

import yaml

from .utils.exceptions import BundleFormatError

logger = logging.getLogger(__name__)

PATH_SEPARATOR = '.'

# 확장자 -> 포맷
BUNDLE_FORMATS: Dict[str, str] = {
    '.yml': 'yaml',
    '.yaml': 'yaml',
    '.json': 'json',
}


class _BundleLoader(yaml.SafeLoader):
    """매핑 키를 문서에 적힌 그대로의 문자열로 읽는 YAML 로더

    YAML 1.1 은 'on', 'yes', '1' 같은 키를 bool/int 로 해석하므로
    키 경로 조회가 가능하도록 원문 텍스트를 키로 사용합니다.
    """

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            self.flatten_mapping(node)

        mapping = {}
        for key_node, value_node in node.value:
            if isinstance(key_node, yaml.ScalarNode):
                key = key_node.value
            else:
                key = _key_text(self.construct_object(key_node, deep=deep))
            mapping[key] = self.construct_object(value_node, deep=deep)
        return mapping


def _key_text(key: Any) -> str:
    if isinstance(key, bool):
        return str(key).lower()
    return str(key)


def _normalize_keys(data: Mapping[Any, Any]) -> Dict[str, Any]:
    """중첩된 매핑의 모든 키를 문자열로 변환"""
    return {
        _key_text(key): _normalize_keys(value) if isinstance(value, Mapping) else value
        for key, value in data.items()
    }


class Bundle:
    """키 경로 -> 문자열 또는 문자열 리스트 값을 담는 읽기 전용 번들"""

    def __init__(self, data: Optional[Mapping[str, Any]] = None, source: str = "<memory>"):
        """
        Bundle 초기화

        Args:
            data: 중첩된 매핑 (문서 순서 유지)
            source: 로그 및 오류 메시지용 출처 이름
        """
        self._data: Dict[str, Any] = _normalize_keys(data or {})
        self.source = source

    @classmethod
    def from_text(cls, text: str, fmt: str = 'yaml', source: str = "<memory>") -> 'Bundle':
        """
        텍스트에서 번들 생성

        Args:
            text: 문서 내용
            fmt: 'yaml' 또는 'json'
            source: 출처 이름

        Returns:
            Bundle: 생성된 번들

        Raises:
            BundleFormatError: 해석 실패 또는 최상위가 매핑이 아닌 경우
        """
        try:
            if fmt == 'yaml':
                data = yaml.load(text, Loader=_BundleLoader)
            elif fmt == 'json':
                data = json.loads(text) if text.strip() else None
            else:
                raise BundleFormatError(f"지원되지 않는 번들 포맷: {fmt} ({source})")
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise BundleFormatError(f"번들 해석 실패 ({source}): {e}") from e

        if data is None:
            return cls({}, source)

        if not isinstance(data, dict):
            raise BundleFormatError(
                f"{source} 의 최상위 값은 매핑이어야 합니다 (현재: {type(data).__name__})")

        return cls(data, source)

    def _lookup(self, path: str) -> Any:
        node: Any = self._data
        for part in path.split(PATH_SEPARATOR):
            if not isinstance(node, dict) or part not in node:
                return _MISSING
            node = node[part]
        return node

    def get(self, path: str, default: Any = None) -> Any:
        value = self._lookup(path)
        return default if value is _MISSING else value

    def contains(self, path: str) -> bool:
        return self._lookup(path) is not _MISSING

    __contains__ = contains

    def is_string(self, path: str) -> bool:
        return isinstance(self._lookup(path), str)

    def is_list(self, path: str) -> bool:
        return isinstance(self._lookup(path), list)

    def is_section(self, path: str) -> bool:
        return isinstance(self._lookup(path), dict)

    def get_string(self, path: str, default: Optional[str] = None) -> Optional[str]:
        value = self._lookup(path)
        return value if isinstance(value, str) else default

    def get_string_list(self, path: str) -> Optional[List[str]]:
        """
        리스트 값 조회

        스칼라 요소(숫자, 불리언 포함)는 문자열로 변환되고
        중첩된 매핑/리스트 요소는 제외됩니다. 리스트가 아니면 None.
        """
        value = self._lookup(path)
        if not isinstance(value, list):
            return None

        result = []
        for item in value:
            if isinstance(item, str):
                result.append(item)
            elif isinstance(item, bool):
                result.append(str(item).lower())
            elif isinstance(item, (int, float)):
                result.append(str(item))
        return result

    def keys(self, deep: bool = False) -> List[str]:
        """
        키 목록 반환 (문서 순서)

        Args:
            deep: True면 섹션 키 다음에 하위 키 경로까지 모두 포함

        Returns:
            List[str]: 키 경로 목록
        """
        if not deep:
            return list(self._data.keys())

        result: List[str] = []
        self._walk(self._data, '', result)
        return result

    def _walk(self, node: Dict[str, Any], prefix: str, result: List[str]) -> None:
        for key, value in node.items():
            path = f"{prefix}{key}"
            result.append(path)
            if isinstance(value, dict):
                self._walk(value, path + PATH_SEPARATOR, result)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"<Bundle {self.source} keys={len(self._data)}>"


class _Missing:
    def __repr__(self) -> str:
        return '<missing>'


_MISSING = _Missing()


def bundle_format_for(name: str) -> Optional[str]:
    """파일 이름의 확장자로 번들 포맷을 결정 (인식할 수 없으면 None)"""
    return BUNDLE_FORMATS.get(Path(name).suffix)


def load_bundle(path: Path) -> Bundle:
    """
    디스크의 번들 파일 로드

    Args:
        path: 번들 파일 경로

    Returns:
        Bundle: 로드된 번들

    Raises:
        BundleFormatError: 확장자를 인식할 수 없거나 해석에 실패한 경우
        OSError: 파일을 읽을 수 없는 경우
    """
    path = Path(path)
    fmt = bundle_format_for(path.name)
    if fmt is None:
        raise BundleFormatError(f"인식할 수 없는 번들 확장자: {path.name}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise BundleFormatError(f"UTF-8 디코딩 실패 ({path}): {e}") from e

    bundle = Bundle.from_text(text, fmt, source=str(path))
    logger.debug(f"번들 로드: {path} ({len(bundle)}개 최상위 키)")
    return bundle

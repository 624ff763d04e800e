# -*- coding: utf-8 -*-
"""
플러그인 실행 환경 - 로거, 내장 리소스 리더, 데이터 디렉토리
"""

import logging
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Callable, Optional

RESOURCE_PACKAGE = "plugin_language"
RESOURCE_ROOT = "resources"


def read_packaged_resource(name: str) -> str:
    """
    패키지에 포함된 리소스 파일을 텍스트로 읽음

    Args:
        name: 'language/lang_en.yml' 형태의 논리 이름

    Returns:
        str: 파일 내용 (UTF-8)

    Raises:
        FileNotFoundError: 리소스가 없는 경우
    """
    resource = resources.files(__package__ or RESOURCE_PACKAGE).joinpath(RESOURCE_ROOT)
    for part in name.split('/'):
        resource = resource.joinpath(part)

    if not resource.is_file():
        raise FileNotFoundError(f"내장 리소스를 찾을 수 없음: {name}")

    return resource.read_text(encoding='utf-8')


@dataclass(frozen=True)
class PluginContext:
    """호스트가 제공하는 기능 묶음"""

    log: logging.Logger
    read_embedded_resource: Callable[[str], str]
    data_dir: Path

    @classmethod
    def create(cls, data_dir, log: Optional[logging.Logger] = None,
               read_embedded_resource: Optional[Callable[[str], str]] = None) -> 'PluginContext':
        """기본 구현으로 채운 PluginContext 생성"""
        return cls(
            log=log or logging.getLogger(RESOURCE_PACKAGE),
            read_embedded_resource=read_embedded_resource or read_packaged_resource,
            data_dir=Path(data_dir),
        )

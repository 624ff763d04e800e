# -*- coding: utf-8 -*-
"""환경 설정 관리 모듈"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

PLUGIN_CONFIG_FILE = "config.yml"


class Config:
    """환경 변수 기반 설정 관리 클래스

    .env 파일은 진입점에서 load_dotenv() 로 읽어 둡니다.
    """

    @staticmethod
    def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
        """환경 변수 값을 가져옵니다. 비어 있으면 기본값을 사용합니다.

        Args:
            key: 환경 변수 키
            default: 기본값

        Returns:
            환경 변수 값 또는 기본값
        """
        value = os.getenv(key)
        if value is None or not value.strip():
            return default
        return value.strip()

    @classmethod
    def data_dir(cls) -> Path:
        """플러그인 데이터 디렉토리"""
        return Path(cls.get_env('PLUGIN_DATA_DIR', 'plugins/Plugin'))

    @classmethod
    def language_file(cls) -> Optional[str]:
        """설정 파일보다 우선하는 언어 파일 (미설정 시 None)"""
        return cls.get_env('LANGUAGE_FILE')

    @classmethod
    def log_level(cls) -> str:
        return cls.get_env('LOG_LEVEL', 'INFO').upper()


def load_plugin_config(data_dir) -> Dict[str, Any]:
    """
    플러그인 설정 파일(config.yml) 로드

    파일이 없거나 해석할 수 없으면 빈 설정을 반환합니다.

    Args:
        data_dir: 플러그인 데이터 디렉토리

    Returns:
        Dict[str, Any]: 설정 매핑
    """
    config_file = Path(data_dir) / PLUGIN_CONFIG_FILE
    if not config_file.is_file():
        logger.info(f"설정 파일이 존재하지 않음: {config_file}")
        return {}

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        logger.warning(f"설정 파일 로드 실패 ({config_file}): {e}")
        return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning(f"설정 파일의 최상위 값이 매핑이 아님: {config_file}")
        return {}

    return data


def resolve_plugin_config(data_dir) -> Dict[str, Any]:
    """설정 파일에 환경 변수(LANGUAGE_FILE) 재정의를 적용한 설정 반환"""
    config = load_plugin_config(data_dir)

    override = Config.language_file()
    if override:
        logger.debug(f"LANGUAGE_FILE 환경 변수 사용: {override}")
        config = {**config, 'languageFile': override}

    return config

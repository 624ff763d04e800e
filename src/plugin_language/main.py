"""
언어 파일 점검 도구 - 사용자 언어 파일에 빠진 메시지 키를 출력
"""

import argparse
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .colors import strip_color, to_ansi
from .config import Config, resolve_plugin_config
from .context import PluginContext
from .language import Language
from .utils.exceptions import LanguageError


class PluginFormatter(logging.Formatter):
    """{시분초.ms} {LEVEL} [{logger}:{line}] {message}"""

    def format(self, record):
        timestamp = self.formatTime(record, '%H:%M:%S')
        ms = int(record.created * 1000) % 1000
        time_with_ms = f"{timestamp}.{ms:03d}"

        location = f"[{record.name}:{record.lineno}]"
        message = f"{time_with_ms} {record.levelname} {location} {record.getMessage()}"
        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)
        return message


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> None:
    """로깅 설정"""
    formatter = PluginFormatter()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8',
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plugin-language-check",
        description="사용자 언어 파일에서 빠진 메시지 키를 찾습니다.",
    )
    parser.add_argument("--data-dir", help="플러그인 데이터 디렉토리 (기본: PLUGIN_DATA_DIR)")
    parser.add_argument("--language-file", help="config.yml 의 languageFile 대신 사용할 파일")
    parser.add_argument("--log-level", help="로그 레벨 (기본: LOG_LEVEL 또는 INFO)")
    parser.add_argument("--log-file", help="로그 파일 경로")
    parser.add_argument("--no-color", action="store_true", help="색상 없이 출력")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """메인 함수"""
    load_dotenv()
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level or Config.log_level(), args.log_file)
    logger = logging.getLogger(__name__)

    data_dir = Path(args.data_dir) if args.data_dir else Config.data_dir()
    config = resolve_plugin_config(data_dir)
    if args.language_file:
        config['languageFile'] = args.language_file

    try:
        language = Language(PluginContext.create(data_dir), config)
    except LanguageError as e:
        logger.error(f"언어 파일 로드 실패: {e}", exc_info=True)
        print(f"❌ 언어 파일을 로드할 수 없습니다: {e}")
        return 2

    render = strip_color if args.no_color else to_ansi
    source = language.language_file or "내장 기본 파일"
    print(f"{render(language.prefix)}언어 파일: {source}")

    missing_strings = language.find_missing_string_keys()
    missing_lists = language.find_missing_list_keys()

    if not missing_strings and not missing_lists:
        print("✅ 빠진 메시지가 없습니다.")
        return 0

    if missing_strings:
        print(f"❌ 빠진 문자열 메시지 {len(missing_strings)}개:")
        for key in missing_strings:
            print(f"  - {key}")

    if missing_lists:
        print(f"❌ 빠진 리스트 메시지 {len(missing_lists)}개:")
        for key in missing_lists:
            print(f"  - {key}")

    return 1


if __name__ == "__main__":
    sys.exit(main())

# -*- coding: utf-8 -*-
"""설정 모듈 단위 테스트"""
import pytest

from src.plugin_language.config import Config, load_plugin_config, resolve_plugin_config


class TestConfig:
    """환경 변수 설정 테스트"""

    def test_get_env(self, monkeypatch: pytest.MonkeyPatch):
        """환경 변수 조회 테스트"""
        monkeypatch.setenv('PLUGIN_DATA_DIR', '  /srv/plugins/Game  ')
        monkeypatch.setenv('LANGUAGE_FILE', '')
        monkeypatch.setenv('LOG_LEVEL', 'debug')

        assert str(Config.data_dir()).replace('\\', '/') == '/srv/plugins/Game'
        assert Config.language_file() is None
        assert Config.log_level() == 'DEBUG'
        assert Config.get_env('TEST_UNSET_KEY', 'fallback') == 'fallback'

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch):
        """환경 변수가 없을 때 기본값"""
        monkeypatch.delenv('PLUGIN_DATA_DIR', raising=False)
        monkeypatch.delenv('LANGUAGE_FILE', raising=False)
        monkeypatch.delenv('LOG_LEVEL', raising=False)

        assert str(Config.data_dir()).replace('\\', '/') == 'plugins/Plugin'
        assert Config.language_file() is None
        assert Config.log_level() == 'INFO'


class TestPluginConfig:
    """config.yml 로드 테스트"""

    def test_load(self, tmp_path):
        (tmp_path / 'config.yml').write_text('languageFile: lang_de.yml\n', encoding='utf-8')

        assert load_plugin_config(tmp_path) == {'languageFile': 'lang_de.yml'}

    def test_missing_file(self, tmp_path):
        assert load_plugin_config(tmp_path) == {}

    def test_broken_file(self, tmp_path, caplog: pytest.LogCaptureFixture):
        """해석할 수 없는 설정 파일은 경고 후 빈 설정"""
        (tmp_path / 'config.yml').write_text('languageFile: [', encoding='utf-8')

        assert load_plugin_config(tmp_path) == {}
        assert any(record.levelname == 'WARNING' for record in caplog.records)

    def test_env_override(self, tmp_path, monkeypatch: pytest.MonkeyPatch):
        """LANGUAGE_FILE 환경 변수가 설정 파일보다 우선"""
        (tmp_path / 'config.yml').write_text(
            'languageFile: lang_de.yml\nother: 1\n', encoding='utf-8')
        monkeypatch.setenv('LANGUAGE_FILE', 'lang_fr.yml')

        assert resolve_plugin_config(tmp_path) == {'languageFile': 'lang_fr.yml', 'other': 1}

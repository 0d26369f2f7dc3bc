"""Tests for layered launcher settings."""

from __future__ import annotations

from launcher.settings import LauncherSettings, SettingsManager


class TestSettingsManager:

    def test_defaults(self, tmp_path):
        settings = SettingsManager().load(tmp_path)
        assert settings == LauncherSettings()
        assert settings.ansible_playbook == "ansible-playbook"
        assert settings.ask_become_pass is False

    def test_env_file_overrides_defaults(self, tmp_path):
        (tmp_path / ".env").write_text(
            "# local overrides\n"
            "\n"
            "LAUNCHER_ASK_BECOME_PASS=yes\n"
            'LAUNCHER_ANSIBLE_PLAYBOOK="/opt/ansible/bin/ansible-playbook"\n'
            "not a setting line\n"
        )
        settings = SettingsManager().load(tmp_path)
        assert settings.ask_become_pass is True
        assert settings.ansible_playbook == "/opt/ansible/bin/ansible-playbook"

    def test_environment_overrides_env_file(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("LAUNCHER_LOG_LEVEL=DEBUG\n")
        monkeypatch.setenv("LAUNCHER_LOG_LEVEL", "warning")
        assert SettingsManager().load(tmp_path).log_level == "WARNING"

    def test_false_values(self, tmp_path, monkeypatch):
        for value in ("false", "0", "no", ""):
            monkeypatch.setenv("LAUNCHER_ASK_BECOME_PASS", value)
            assert SettingsManager().load(tmp_path).ask_become_pass is False

    def test_empty_executable_falls_back(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LAUNCHER_ANSIBLE_PLAYBOOK", "")
        assert SettingsManager().load(tmp_path).ansible_playbook == "ansible-playbook"

    def test_load_raw_keeps_unknown_env_file_keys(self, tmp_path):
        (tmp_path / ".env").write_text("ANSIBLE_CONFIG=ansible.cfg\n")
        raw = SettingsManager().load_raw(tmp_path)
        assert raw["ANSIBLE_CONFIG"] == "ansible.cfg"
        assert raw["LAUNCHER_GIT"] == "git"

    def test_generate_env_template(self, tmp_path):
        path = SettingsManager().generate_env_template(tmp_path)
        text = path.read_text()
        assert path.name == ".env.example"
        for key in (
            "LAUNCHER_ANSIBLE_PLAYBOOK",
            "LAUNCHER_ASK_BECOME_PASS",
            "LAUNCHER_GIT",
            "LAUNCHER_LOG_LEVEL",
        ):
            assert f"{key}=" in text

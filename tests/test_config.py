from __future__ import annotations

from modedit.config import DEFAULT_ESC_DELAY, DEFAULT_STATUS_TEXT, EditorConfig


def test_defaults() -> None:
    config = EditorConfig.from_env({})

    assert config.status_text == DEFAULT_STATUS_TEXT == "Status line"
    assert config.esc_delay == DEFAULT_ESC_DELAY
    assert config.log_preset is None
    assert config.log_file is None


def test_from_env_reads_prefixed_values() -> None:
    config = EditorConfig.from_env(
        {
            "MODEDIT_STATUS_TEXT": "hello",
            "MODEDIT_ESC_DELAY": "0.05",
            "MODEDIT_LOG_PRESET": "production",
            "MODEDIT_LOG_FILE": "/tmp/modedit.log",
        }
    )

    assert config.status_text == "hello"
    assert config.esc_delay == 0.05
    assert config.log_preset == "production"
    assert config.log_file == "/tmp/modedit.log"


def test_invalid_esc_delay_falls_back() -> None:
    assert EditorConfig.from_env({"MODEDIT_ESC_DELAY": "soon"}).esc_delay == 0.35
    assert EditorConfig.from_env({"MODEDIT_ESC_DELAY": "-1"}).esc_delay == 0.35


def test_from_env_uses_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("MODEDIT_STATUS_TEXT", "from env")

    assert EditorConfig.from_env().status_text == "from env"


def test_override_skips_none() -> None:
    config = EditorConfig(status_text="base")

    updated = config.override(status_text=None, esc_delay=0.1)

    assert updated.status_text == "base"
    assert updated.esc_delay == 0.1
    assert config.esc_delay == DEFAULT_ESC_DELAY

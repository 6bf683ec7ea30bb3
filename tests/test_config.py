import pytest

from filfox_ledger_export.config import Settings, load_settings


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("FILFOX_API_ENDPOINT", "FILFOX_PAGE_SIZE", "FILFOX_HTTP_TIMEOUT", "LEDGER_ACCOUNT_NAME", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    s = Settings()
    assert s.api_endpoint == "https://filfox.info/api/v1"
    assert s.page_size == 100
    assert s.ledger_account_name == "Filfox API"
    assert s.log_level == "INFO"


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("FILFOX_API_ENDPOINT", "https://mirror.test/api/v1")
    monkeypatch.setenv("FILFOX_PAGE_SIZE", "25")
    monkeypatch.setenv("LEDGER_ACCOUNT_NAME", "Cold wallet")

    s = Settings()
    assert s.api_endpoint == "https://mirror.test/api/v1"
    assert s.page_size == 25
    assert s.ledger_account_name == "Cold wallet"


def test_dotenv_file_is_read(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    (tmp_path / ".env").write_text("LOG_LEVEL=DEBUG\n", encoding="utf-8")

    assert Settings().log_level == "DEBUG"


def test_invalid_page_size_rejected(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("FILFOX_PAGE_SIZE", "0")
    load_settings.cache_clear()
    try:
        with pytest.raises(ValueError):
            load_settings()
    finally:
        load_settings.cache_clear()

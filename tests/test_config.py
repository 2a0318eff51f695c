from pathlib import Path

from textfile.config import Settings, load_settings
from textfile.models import NewlineStyle


def test_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in [
        "TEXTFILE_ROOT",
        "TEXTFILE_WESTERN_MIN_CONFIDENCE",
        "TEXTFILE_DEFAULT_ENCODING",
        "TEXTFILE_DEFAULT_NEWLINE",
        "TEXTFILE_DEFAULT_BOM",
        "TEXTFILE_MAX_READ_BYTES",
        "TEXTFILE_LOG_LEVEL",
    ]:
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()
    assert settings.root_dir.resolve() == tmp_path.resolve()
    assert settings.western_min_confidence == 0.99
    assert settings.write_defaults().encoding == "utf-8"
    assert settings.write_defaults().newline_style is NewlineStyle.LF
    assert settings.write_defaults().has_bom is False


def test_environment_overrides(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TEXTFILE_ROOT", str(tmp_path / "served"))
    monkeypatch.setenv("TEXTFILE_DEFAULT_NEWLINE", "CRLF")
    monkeypatch.setenv("TEXTFILE_DEFAULT_BOM", "yes")
    monkeypatch.setenv("TEXTFILE_WESTERN_MIN_CONFIDENCE", "0.9")
    monkeypatch.setenv("TEXTFILE_LOG_LEVEL", "debug")

    settings = load_settings()
    assert settings.root_dir == tmp_path / "served"
    assert settings.default_newline is NewlineStyle.CRLF
    assert settings.default_bom is True
    assert settings.western_min_confidence == 0.9
    assert settings.log_level == "DEBUG"


def test_dotenv_file_is_loaded(tmp_path, monkeypatch):
    monkeypatch.setenv("TEXTFILE_MAX_READ_BYTES", "1")
    monkeypatch.delenv("TEXTFILE_MAX_READ_BYTES")
    env_file = tmp_path / "custom.env"
    env_file.write_text("TEXTFILE_MAX_READ_BYTES=1024\n")

    settings = load_settings(env_file)
    assert settings.max_read_bytes == 1024


def test_settings_model():
    settings = Settings(root_dir=Path("/srv"), default_encoding="gb2312")
    assert settings.write_defaults().encoding == "gb2312"

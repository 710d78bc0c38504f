import pytest

from quiz.config import Settings, load_settings

_VARS = ("QUIZ_SEED", "QUIZ_SHUFFLE_QUESTIONS", "QUIZ_SHUFFLE_ANSWERS", "LOG_LEVEL")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in _VARS:
        monkeypatch.setenv(name, "unset")
        monkeypatch.delenv(name)
    return monkeypatch


def test_defaults(clean_env):
    assert load_settings() == Settings()


def test_env_overrides(clean_env):
    clean_env.setenv("QUIZ_SEED", "12")
    clean_env.setenv("QUIZ_SHUFFLE_QUESTIONS", "no")
    clean_env.setenv("QUIZ_SHUFFLE_ANSWERS", "Off")
    clean_env.setenv("LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.seed == 12
    assert settings.shuffle_questions is False
    assert settings.shuffle_answers is False
    assert settings.log_level == "DEBUG"


def test_dotenv_file_is_read(clean_env, tmp_path):
    (tmp_path / ".env").write_text("QUIZ_SEED=5\n", encoding="utf-8")
    assert load_settings().seed == 5


@pytest.mark.parametrize(
    "name, value",
    [
        ("QUIZ_SEED", "abc"),
        ("QUIZ_SHUFFLE_QUESTIONS", "maybe"),
        ("LOG_LEVEL", "chatty"),
    ],
)
def test_invalid_values_raise(clean_env, name, value):
    clean_env.setenv(name, value)
    with pytest.raises(RuntimeError) as excinfo:
        load_settings()
    assert name in str(excinfo.value)

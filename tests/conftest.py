import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Point HOME and cwd at an empty directory and clear CLAWDBOT_* variables.

    Keeps the credential-file probe and config discovery away from the real
    user's ~/.clawdbot.
    """
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.delenv("CLAWDBOT_AUTH_TOKEN", raising=False)
    monkeypatch.delenv("CLAWDBOT_CONFIG", raising=False)
    monkeypatch.chdir(work)
    return home


@pytest.fixture
def clawdbot_dir(isolated_env):
    d = isolated_env / ".clawdbot"
    d.mkdir()
    return d

import json
import logging
from pathlib import Path

from clawcheck.loader import ConfigLocator, load_document, read_config

FIXTURES = Path(__file__).parent / "fixtures"


# --- read_config ---

def test_read_json_fixture():
    data = read_config(FIXTURES / "clawdbot_hardened.json")
    assert data["gateway"]["port"] == 18789
    assert data["dm_policy_allowlist"] == ["alice", "bob"]


def test_read_flat_yaml():
    data = read_config(FIXTURES / "clawdbotrc_flat.yaml")
    assert data["bind_address"] == "0.0.0.0"
    assert data["audit"] == "enabled"


def test_read_rc_file_with_json_content(tmp_path):
    rc = tmp_path / ".clawdbotrc"
    rc.write_text(json.dumps({"sandbox": "all"}))
    assert read_config(rc) == {"sandbox": "all"}


def test_read_corrupt_json_returns_none(caplog):
    assert read_config(FIXTURES / "corrupt.json") is None
    assert "invalid JSON" in caplog.text


def test_read_non_mapping_returns_none(tmp_path):
    rc = tmp_path / "config.yaml"
    rc.write_text("just a string")
    assert read_config(rc) is None


def test_read_empty_yaml_is_empty_dict(tmp_path):
    rc = tmp_path / "config.yaml"
    rc.write_text("")
    assert read_config(rc) == {}


def test_read_invalid_yaml_returns_none(tmp_path):
    rc = tmp_path / "config.yaml"
    rc.write_text("key: [unclosed\n")
    assert read_config(rc) is None


def test_read_missing_file_returns_none(tmp_path):
    assert read_config(tmp_path / "nope.json") is None


# --- ConfigLocator ---

def test_locator_explicit_path_first(clawdbot_dir):
    (clawdbot_dir / "config.json").write_text("{}")
    explicit = FIXTURES / "clawdbot_vulnerable.json"
    candidates = ConfigLocator(config_path=explicit).candidates()
    assert candidates[0] == explicit
    assert candidates[1] == clawdbot_dir / "config.json"


def test_locator_env_override(monkeypatch):
    monkeypatch.setenv("CLAWDBOT_CONFIG", str(FIXTURES / "clawdbot_hardened.json"))
    assert ConfigLocator().candidates() == [FIXTURES / "clawdbot_hardened.json"]


def test_locator_home_search_order(clawdbot_dir):
    (clawdbot_dir / ".clawdbotrc").write_text("sandbox: all\n")
    (clawdbot_dir / "config.yaml").write_text("sandbox: all\n")
    candidates = ConfigLocator().candidates()
    assert [p.name for p in candidates] == ["config.yaml", ".clawdbotrc"]


def test_locator_cwd_rc_file():
    rc = Path.cwd() / ".clawdbotrc"
    rc.write_text("dm_policy: allowlist\n")
    assert ConfigLocator().candidates() == [rc]


def test_locator_nothing_found():
    assert ConfigLocator().candidates() == []


def test_searched_locations_lists_everything(monkeypatch):
    monkeypatch.setenv("CLAWDBOT_CONFIG", "/etc/clawdbot.json")
    locations = ConfigLocator(config_path=Path("/tmp/x.json")).searched_locations()
    assert locations[0] == "/tmp/x.json"
    assert "$CLAWDBOT_CONFIG (/etc/clawdbot.json)" in locations
    assert any(loc.endswith("config.json") for loc in locations)
    assert any(loc.endswith(".clawdbotrc") for loc in locations)


# --- load_document ---

def test_load_explicit_file():
    doc = load_document(FIXTURES / "clawdbot_vulnerable.json")
    assert doc.lookup("gateway.bind_address") == "0.0.0.0"
    assert doc.source == FIXTURES / "clawdbot_vulnerable.json"


def test_load_nothing_found_is_empty():
    doc = load_document()
    assert len(doc) == 0
    assert doc.source is None


def test_load_missing_explicit_path_warns_and_falls_back(clawdbot_dir, caplog):
    (clawdbot_dir / "config.json").write_text('{"sandbox": "all"}')
    doc = load_document(Path("/nonexistent/clawdbot.json"))
    assert doc.lookup("sandbox") == "all"
    assert "config file not found" in caplog.text


def test_load_skips_corrupt_candidate(clawdbot_dir, caplog):
    (clawdbot_dir / "config.json").write_text("{not json")
    (clawdbot_dir / "config.yaml").write_text("sandbox: all\n")
    with caplog.at_level(logging.WARNING):
        doc = load_document()
    assert doc.lookup("sandbox") == "all"
    assert doc.source == clawdbot_dir / "config.yaml"
    assert "invalid JSON" in caplog.text


def test_load_all_corrupt_is_empty():
    doc = load_document(FIXTURES / "corrupt.json")
    assert len(doc) == 0


def test_load_self_referencing_yaml_is_skipped(tmp_path, caplog):
    config = tmp_path / "cyclic.yaml"
    config.write_text("a: &x [*x]\n")
    doc = load_document(config)
    assert len(doc) == 0
    assert "self-referencing" in caplog.text


def test_load_self_referencing_yaml_falls_back(clawdbot_dir, tmp_path):
    (clawdbot_dir / "config.json").write_text('{"sandbox": "all"}')
    config = tmp_path / "cyclic.yaml"
    config.write_text("a: &x [*x]\n")
    doc = load_document(config)
    assert doc.lookup("sandbox") == "all"

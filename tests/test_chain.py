import pytest

from l2utils.chain import (
    ContentValidator,
    ExistValidator,
    Profile,
    YamlValidator,
    run_chain,
)


def test_run_chain_loads_username(tmp_path, capsys):
    (tmp_path / "chain.yaml").write_text("username: artem\n", encoding="utf-8")
    profile = run_chain(tmp_path)
    assert profile == Profile(username="artem")
    out = capsys.readouterr().out
    assert out.index("ExistValidator is OK") < out.index("ContentValidator is OK")
    assert out.index("ContentValidator is OK") < out.index("YamlValidator is OK")


def test_run_chain_missing_file_leaves_profile_empty(tmp_path, capsys):
    profile = run_chain(tmp_path)
    assert profile.username == ""
    assert "[Exist] Can't locate file, aborting" in capsys.readouterr().out


def test_exist_validator_raises_for_missing_file(tmp_path):
    with pytest.raises(ValueError, match=r"\[Exist\]"):
        ExistValidator(base_dir=tmp_path).validate(Profile(), "absent.yaml")


def test_content_validator_raises_for_directory(tmp_path):
    with pytest.raises(ValueError, match=r"\[Content\]"):
        ContentValidator().validate(Profile(), tmp_path)


def test_run_chain_stops_at_unreadable_file(tmp_path, capsys):
    (tmp_path / "chain.yaml").mkdir()
    profile = run_chain(tmp_path)
    out = capsys.readouterr().out
    assert "[Content] Can't read file, aborting" in out
    assert "YamlValidator is OK" not in out
    assert profile.username == ""


def test_yaml_validator_rejects_broken_yaml():
    with pytest.raises(ValueError, match=r"\[Yaml\]"):
        YamlValidator().validate(Profile(), b"username: [unclosed")


def test_yaml_validator_rejects_non_mapping():
    with pytest.raises(ValueError, match=r"\[Yaml\]"):
        YamlValidator().validate(Profile(), b"- a\n- b\n")


def test_yaml_validator_accepts_empty_document():
    profile = Profile(username="kept")
    YamlValidator().validate(profile, b"")
    assert profile.username == "kept"


def test_content_passes_bytes_to_successor(tmp_path):
    path = tmp_path / "p.yaml"
    path.write_text("username: ivan\nother: 1\n", encoding="utf-8")
    profile = Profile()
    ContentValidator(successor=YamlValidator()).validate(profile, path)
    assert profile.username == "ivan"


def test_exist_validator_without_successor_only_checks(tmp_path):
    (tmp_path / "x.yaml").write_text("username: ivan\n", encoding="utf-8")
    profile = Profile()
    ExistValidator(base_dir=tmp_path).validate(profile, "x.yaml")
    assert profile.username == ""
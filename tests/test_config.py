import pytest
import yaml
from pydantic import ValidationError

from roshambo.config import ConfigError, GameConfig, load_config

BIG_GAME_YAML = """
beaten_by:
  Rock: [paper, spock]
  paper: [scissors, lizard]
  scissors: [rock, spock]
  lizard: [rock, scissors]
  spock: [paper, lizard]
rounds:
  default: 10
seed: 5
logging:
  level: DEBUG
"""


def test_default_config():
    cfg = load_config()
    assert cfg.hands == ("rock", "paper", "scissors")
    assert cfg.beaten_by["rock"] == ("paper",)
    assert cfg.messages.player == "You Win!"
    assert cfg.messages.computer == "Computer Wins"
    assert cfg.messages.draw == "It's a draw!"
    assert cfg.default_rounds == 1000


def test_load_bigger_game(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(BIG_GAME_YAML, encoding="utf-8")
    cfg = load_config(str(path))
    assert cfg.hands == ("rock", "paper", "scissors", "lizard", "spock")
    assert cfg.default_rounds == 10
    assert cfg.seed == 5
    assert cfg.log_level == "DEBUG"


def test_config_is_frozen(cfg):
    with pytest.raises(ValidationError):
        cfg.seed = 1


@pytest.mark.parametrize(
    "beaten_by",
    [
        {},
        {"rock": ["rock"]},
        {"rock": ["paper"]},
        {"rock": ["paper"], "paper": []},
    ],
)
def test_bad_relations_rejected(tmp_path, beaten_by):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"beaten_by": beaten_by}), encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(str(path))


def test_missing_relation_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("seed: 1\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(str(path))


def test_model_accepts_plain_dict():
    cfg = GameConfig(beaten_by={"a": ["b"], "b": ["a"]})
    assert cfg.hands == ("a", "b")


def test_relation_is_read_only(cfg):
    with pytest.raises(TypeError):
        cfg.beaten_by["rock"] = ("scissors",)
    with pytest.raises(TypeError):
        del cfg.beaten_by["paper"]
    assert cfg.beaten_by["rock"] == ("paper",)
    assert isinstance(cfg.beaten_by["rock"], tuple)


@pytest.mark.parametrize(
    "extra",
    [
        {"rounds": 5},
        {"rounds": {"default": -1}},
        {"logging": "loud"},
        {"logging": {"level": "chatty"}},
        {"messages": ["You Win!"]},
    ],
)
def test_malformed_sections_rejected(tmp_path, extra):
    raw = {"beaten_by": {"rock": ["paper"], "paper": ["scissors"], "scissors": ["rock"]}}
    raw.update(extra)
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(raw), encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(str(path))


def test_log_level_is_normalised():
    cfg = GameConfig(beaten_by={"a": ["b"], "b": ["a"]}, logging={"level": " info "})
    assert cfg.log_level == "INFO"


def test_top_level_must_be_a_mapping(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- rock\n- paper\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(str(path))

import pytest
from pydantic import ValidationError

from pocket222.config import (
    DiameterConfig,
    ScrambleClass,
    SolveConfig,
    load_config,
    merge_config_file,
)
from pocket222.cube import Facelet
from pocket222.heuristic import HeuristicType
from pocket222.search import MAX_COST


def test_solve_defaults():
    config = SolveConfig()
    assert config.scramble is None
    assert config.heuristic == HeuristicType.POS_AND_ORR
    assert config.max_cost == MAX_COST
    assert config.front_facelet() == Facelet.GREEN
    assert config.up_facelet() == Facelet.WHITE


def test_colors_are_validated():
    assert SolveConfig(front="r", up="y").front == "R"
    with pytest.raises(ValidationError):
        SolveConfig(front="X")


def test_depth_bounds():
    with pytest.raises(ValidationError):
        SolveConfig(short_circuit_depth=12)
    with pytest.raises(ValidationError):
        DiameterConfig(short_circuit_depth=-1)


def test_load_yaml(tmp_path):
    path = tmp_path / "solve.yaml"
    path.write_text("scramble: R U2 F'\nheuristic: orr\nscramble_class: cfl\nshort_circuit_depth: 3\n")
    config = load_config(path, SolveConfig)
    assert config.scramble == "R U2 F'"
    assert config.heuristic == HeuristicType.ORR
    assert config.scramble_class == ScrambleClass.CFL
    assert config.short_circuit_depth == 3


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path, DiameterConfig) == DiameterConfig()


def test_explicit_values_beat_the_file(tmp_path):
    path = tmp_path / "diameter.yaml"
    path.write_text("short_circuit_depth: 4\nlimit: 100\nverbose: true\n")
    config = merge_config_file(DiameterConfig(limit=10, config_file=str(path)))
    assert config.limit == 10
    assert config.short_circuit_depth == 4
    assert config.verbose


def test_no_file_is_a_no_op():
    config = SolveConfig(seed=3)
    assert merge_config_file(config) is config


def test_explicit_default_beats_the_file(tmp_path):
    path = tmp_path / "diameter.yaml"
    path.write_text("short_circuit_depth: 4\n")
    config = merge_config_file(DiameterConfig(short_circuit_depth=7, config_file=str(path)))
    assert config.short_circuit_depth == 7

from enum import Enum
from pathlib import Path
from typing import Optional, Type, TypeVar, Union

import yaml
from pydantic import BaseModel, Field, field_validator

from .cube import Facelet
from .heuristic import HeuristicType
from .search import MAX_COST


class ScrambleClass(str, Enum):
    FULL = "full"
    OFL = "ofl"
    CFL = "cfl"
    OLL = "oll"
    CFL_OLL = "cfl_oll"
    CLL = "cll"


class SolveConfig(BaseModel):
    # either a scramble in face notation, or a random scramble class
    scramble: Optional[str] = None
    scramble_class: Optional[ScrambleClass] = None

    # reference colors of the solved cube the scramble is applied to
    front: str = "G"
    up: str = "W"

    heuristic: HeuristicType = HeuristicType.POS_AND_ORR
    short_circuit_depth: int = Field(default=5, ge=0, le=9)
    preload_heuristics: bool = True
    max_cost: int = MAX_COST
    check_consistency: bool = True

    seed: Optional[int] = None
    config_file: Optional[str] = None  # YAML settings, overridden by explicit flags
    verbose: bool = False

    @field_validator("front", "up")
    @classmethod
    def _known_color(cls, v: str) -> str:
        Facelet.from_letter(v)
        return v.upper()

    def front_facelet(self) -> Facelet:
        return Facelet.from_letter(self.front)

    def up_facelet(self) -> Facelet:
        return Facelet.from_letter(self.up)


class DiameterConfig(BaseModel):
    heuristic: HeuristicType = HeuristicType.POS_AND_ORR
    # 7 keeps the cache under ~300k entries; 9 is faster overall but needs a few GB
    short_circuit_depth: int = Field(default=7, ge=0, le=10)
    max_cost: int = MAX_COST
    check_consistency: bool = False

    limit: Optional[int] = None  # only solve the first N configurations
    config_file: Optional[str] = None
    verbose: bool = False


ConfigT = TypeVar("ConfigT", bound=BaseModel)


def load_config(path: Union[str, Path], config_cls: Type[ConfigT]) -> ConfigT:
    """Read a YAML file into one of the config models."""
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    return config_cls(**data)


def merge_config_file(config: ConfigT) -> ConfigT:
    """
    Layer the YAML file named by `config.config_file` under explicitly given settings.

    Values in the file replace defaults; any field explicitly set on `config` (given on
    the command line, even if equal to its default) wins over the file.
    """
    path = getattr(config, "config_file", None)
    if path is None:
        return config
    config_cls = type(config)
    file_values = load_config(path, config_cls).model_dump()
    explicit = {k: getattr(config, k) for k in config.model_fields_set}
    return config_cls(**{**file_values, **explicit})

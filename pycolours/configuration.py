from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Type, TypeVar, Union

import yaml


class Rounding(Enum):
    HALF_UP = "half_up"
    HALF_EVEN = "half_even"


@dataclass(frozen=True)
class Config:
    rounding: Rounding = Rounding.HALF_UP
    # rgb(...) input is only checked against its digit pattern unless this is set
    strict_rgb_range: bool = False


DEFAULT_CONFIG = Config()


def encode(obj: Any) -> Union[Dict, List]:
    if isinstance(obj, Enum):
        return obj.value
    elif isinstance(obj, dict):
        return {k: encode(v) for k, v in obj.items()}
    elif not isinstance(obj, str) and hasattr(obj, "__iter__"):
        return [encode(v) for v in obj]
    elif hasattr(obj, "__dict__"):
        return {
            k: encode(v)
            for k, v in obj.__dict__.items()
            if not callable(v) and not k.startswith('_')
        }
    else:
        return obj


T = TypeVar("T")


def decode(conf_dict: Any, cls: Type[T]) -> T:
    from typing import get_type_hints
    if isinstance(cls, type) and issubclass(cls, Enum):
        return cls(conf_dict)
    if cls is bool:
        if not isinstance(conf_dict, bool):
            raise ValueError(f"expected true or false, got {conf_dict!r}")
        return conf_dict
    hints = get_type_hints(cls)
    if not hints:
        return cls(conf_dict)
    arguments = {}
    for name in hints.keys():
        if name in conf_dict:
            arguments[name] = decode(conf_dict[name], hints[name])
    return cls(**arguments)


def load_configuration(text: str) -> Config:
    data = yaml.safe_load(text)
    if not data:
        return Config()
    if not isinstance(data, dict):
        raise ValueError(f"expected a mapping of options, got {data!r}")
    return decode(data, Config)


def dump_configuration(config: Config) -> str:
    return yaml.dump(encode(config))

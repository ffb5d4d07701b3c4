from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from .entropy import RANKED_STRATEGIES, create_strategy
from .errors import InvalidArgumentError
from .picker import DEFAULT_MAX_ATTEMPTS
from .sampler import DEFAULT_PATTERN, Sampler
from .windowing import DEFAULT_CHUNK_SIZE, resolve_encoding
from .wordlist import WordlistHandle

STRATEGY_NAMES = ("auto",) + tuple(strategy.name for strategy in RANKED_STRATEGIES)


@dataclass(slots=True)
class GeneratorSettings:
    """Defaults for the password generation commands."""

    length: int = 12
    numeric_length: int = 0
    pattern: str = DEFAULT_PATTERN


@dataclass(slots=True)
class ToolboxConfig:
    """Configuration options for dictionary access and generation."""

    dictionary_path: str | None = None
    dictionary_encoding: str | None = None
    chunk_size: int = DEFAULT_CHUNK_SIZE
    cache_enabled: bool = False
    case_insensitive: bool = True
    entropy_strategy: str = "auto"
    max_pick_attempts: int = DEFAULT_MAX_ATTEMPTS
    generator: GeneratorSettings = field(default_factory=GeneratorSettings)

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dictionary suitable for YAML output."""
        return asdict(self)


def _build_kwargs(data: Mapping[str, Any], base_dir: Path | None = None) -> dict[str, Any]:
    allowed = {field.name for field in fields(ToolboxConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    for key in ("chunk_size", "max_pick_attempts"):
        if key in kwargs:
            kwargs[key] = _positive_int(key, kwargs[key])
    if kwargs.get("dictionary_path"):
        dictionary = Path(str(kwargs["dictionary_path"])).expanduser()
        if base_dir is not None and not dictionary.is_absolute():
            dictionary = base_dir / dictionary
        kwargs["dictionary_path"] = str(dictionary)
    else:
        kwargs.pop("dictionary_path", None)
    if kwargs.get("dictionary_encoding"):
        kwargs["dictionary_encoding"] = resolve_encoding(str(kwargs["dictionary_encoding"]))
    else:
        kwargs.pop("dictionary_encoding", None)
    if "entropy_strategy" in kwargs:
        strategy = str(kwargs["entropy_strategy"]).lower().strip()
        if strategy not in STRATEGY_NAMES:
            raise InvalidArgumentError(
                f"entropy_strategy must be one of {', '.join(STRATEGY_NAMES)}; got {strategy!r}."
            )
        kwargs["entropy_strategy"] = strategy
    if "generator" in data:
        generator_value = data["generator"]
        if isinstance(generator_value, GeneratorSettings):
            kwargs["generator"] = generator_value
        elif isinstance(generator_value, Mapping):
            kwargs["generator"] = _build_generator_settings(generator_value)
        else:
            kwargs.pop("generator")
    return kwargs


def _build_generator_settings(data: Mapping[str, Any]) -> GeneratorSettings:
    generator_allowed = {field.name for field in fields(GeneratorSettings)}
    filtered = {key: data[key] for key in data if key in generator_allowed}
    for key in ("length", "numeric_length"):
        if key in filtered:
            filtered[key] = _non_negative_int(f"generator.{key}", filtered[key])
    if "pattern" in filtered:
        filtered["pattern"] = str(filtered["pattern"] or DEFAULT_PATTERN)
    return GeneratorSettings(**filtered)


def _positive_int(key: str, value: Any) -> int:
    number = _non_negative_int(key, value)
    if number == 0:
        raise InvalidArgumentError(f"{key} must be greater than zero.")
    return number


def _non_negative_int(key: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidArgumentError(f"{key} must be a non-negative integer; got {value!r}.")
    return value


def config_from_dict(
    data: Mapping[str, Any] | None, base_dir: str | Path | None = None
) -> ToolboxConfig:
    """
    Build a ToolboxConfig from a dictionary-like input.

    Unknown keys are ignored. Relative dictionary paths are resolved against
    ``base_dir`` when given. Invalid values raise InvalidArgumentError.
    """
    if data is None:
        return ToolboxConfig()
    base = Path(base_dir) if base_dir is not None else None
    return ToolboxConfig(**_build_kwargs(data, base))


def config_from_yaml(path: str | Path) -> ToolboxConfig:
    """Load configuration from a YAML file, resolving paths next to the file."""
    config_path = Path(path)
    contents = config_path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(contents) or {}
    except yaml.YAMLError as exc:
        raise InvalidArgumentError(f"Unable to parse configuration {path}.") from exc
    if not isinstance(parsed, MutableMapping):
        raise InvalidArgumentError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed, base_dir=config_path.parent)


def load_config(path: str | Path | None = None) -> ToolboxConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return ToolboxConfig()
    return config_from_yaml(path)


def handle_from_config(config: ToolboxConfig) -> WordlistHandle:
    """Build a WordlistHandle for the configured dictionary."""
    return WordlistHandle(
        path=config.dictionary_path,
        encoding=config.dictionary_encoding,
        chunk_size=config.chunk_size,
        cache_enabled=config.cache_enabled,
    )


def sampler_from_config(config: ToolboxConfig) -> Sampler:
    """Build a Sampler backed by the configured entropy strategy."""
    return Sampler(create_strategy(config.entropy_strategy))

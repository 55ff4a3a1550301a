"""World generator configuration loading from TOML files."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field

from .terrain.config import BiomeConfig, GenerationOptions, StructureConfig
from .terrain.generator import DEFAULT_SEED


class SpawnConfig(BaseModel):
    """Spawn point and pre-generated area for new worlds."""

    x: int = 0
    y: int = 70
    z: int = 0
    radius: int = Field(default=1, ge=0, description="Spawn chunks around the origin")


class Config(BaseModel):
    """Complete configuration for the world generator."""

    default_seed: str = DEFAULT_SEED
    seed_length: int = Field(default=10, gt=0, description="Length of random seeds")
    generation: GenerationOptions = Field(default_factory=GenerationOptions)
    structures: StructureConfig = Field(default_factory=StructureConfig)
    biomes: BiomeConfig = Field(default_factory=BiomeConfig)
    spawn: SpawnConfig = Field(default_factory=SpawnConfig)


def load_config(config_path: Path) -> Config:
    """Load configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed Config object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return Config.model_validate(data)


def find_config(name: str) -> Path:
    """Find a config file by name.

    Searches in the following order:
    1. Exact path if name contains path separator or ends in .toml
    2. configs/{name}.toml
    3. configs/{name}

    Args:
        name: Config name or path.

    Returns:
        Path to the config file.

    Raises:
        FileNotFoundError: If config file is not found.
    """
    if "/" in name or name.endswith(".toml"):
        path = Path(name)
        if path.exists():
            return path
        raise FileNotFoundError(f"Config file not found: {name}")

    configs_dir = _configs_dir()

    config_path = configs_dir / f"{name}.toml"
    if config_path.exists():
        return config_path

    config_path = configs_dir / name
    if config_path.exists():
        return config_path

    raise FileNotFoundError(
        f"Config '{name}' not found in {configs_dir}. "
        f"Available configs: {list_configs()}"
    )


def list_configs() -> list[str]:
    """List available config names."""
    configs_dir = _configs_dir()
    if not configs_dir.exists():
        return []
    return sorted(p.stem for p in configs_dir.glob("*.toml"))


def _configs_dir() -> Path:
    return Path(__file__).parent.parent.parent / "configs"

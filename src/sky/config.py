import json
import os
import tempfile
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, ValidationError

from sky.errors import ConfigError

DEFAULT_MODEL = "text-davinci-003"
DEFAULT_BASE_URL = "https://api.openai.com/v1"


class Config(BaseModel):
    api_key: str | None = None
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL


class ConfigStore:
    def __init__(self, app_name: str = "sky", path: Path | None = None):
        self._path = path or self._default_path(app_name)

    @property
    def path(self) -> Path:
        return self._path

    @staticmethod
    def _default_path(app_name: str) -> Path:
        if "XDG_CONFIG_HOME" in os.environ:
            config_dir = Path(os.environ["XDG_CONFIG_HOME"])
        else:
            config_dir = Path.home() / ".config"
        return config_dir / app_name / "config.json"

    def load(self) -> Config:
        try:
            with open(self._path, "rb") as f:
                doc = json.loads(f.read())
        except FileNotFoundError:
            logger.debug(f"No config at {self._path}, using defaults")
            return Config()
        except (OSError, ValueError) as e:
            raise ConfigError(f"Failed to read config file {self._path}: {e}")

        try:
            return Config.model_validate(doc)
        except ValidationError as e:
            raise ConfigError(f"Invalid config file {self._path}: {e}")

    def store(self, config: Config):
        # Replace the file in one step so readers never see a partial write.
        tmp_name = None
        try:
            os.makedirs(self._path.parent, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
                delete=False,
                encoding="utf-8",
            ) as f:
                tmp_name = f.name
                f.write(config.model_dump_json(indent=2))
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self._path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise ConfigError(f"Failed to write config file {self._path}: {e}")
        logger.debug(f"Config written to {self._path}")

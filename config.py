import json
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class GeneratorConfig:
    __slots__ = ("prefix", "base", "length", "precision", "max_attempts")

    def __init__(self, prefix="", base=36, length=4, precision="s", max_attempts=None):
        self.prefix = prefix
        self.base = base
        self.length = length
        self.precision = precision
        self.max_attempts = max_attempts


class ServerConfig:
    __slots__ = ("host", "port", "max_batch")

    def __init__(self, host="127.0.0.1", port=8080, max_batch=1000):
        self.host = host
        self.port = port
        self.max_batch = max_batch


class LoggingConfig:
    __slots__ = ("level", "file", "crash_file")

    def __init__(self, level="INFO", file="logs/sortid.log", crash_file="logs/crash.log"):
        self.level = level
        self.file = file
        self.crash_file = crash_file


class Config:
    __slots__ = ("generator", "server", "logging")

    def __init__(self, generator=None, server=None, logging=None):
        self.generator = generator or GeneratorConfig()
        self.server = server or ServerConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            GeneratorConfig(**d.get("generator", {})),
            ServerConfig(**d.get("server", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Mapping

import mysql.connector


@dataclass(frozen=True)
class DBConfig:
    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = ""
    database: str = "shop_db"

    @classmethod
    def from_mapping(cls, db_config: Mapping[str, Any]) -> "DBConfig":
        defaults = cls()
        return cls(
            host=str(db_config.get("host", defaults.host)),
            port=int(db_config.get("port", defaults.port)),
            user=str(db_config.get("user", defaults.user)),
            password=str(db_config.get("password", defaults.password)),
            database=str(db_config.get("database", defaults.database)),
        )

    def connect_args(self, *, with_database: bool = True) -> dict:
        args = {
            "host": self.host,
            "port": self.port,
            "user": self.user,
            "password": self.password,
            "use_pure": True,
        }
        if with_database:
            args["database"] = self.database
        return args


class DatabaseConnection:
    """Connection factory shared by all MySQL repositories.

    Every unit of work opens its own short-lived connection; nothing is pooled.
    """

    _instances: ClassVar[dict[DBConfig, "DatabaseConnection"]] = {}

    def __init__(self, config: DBConfig):
        self.config = config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        # one factory per target database
        return cls._instances.setdefault(config, cls(config))

    def connect(self, *, with_database: bool = True):
        return mysql.connector.connect(**self.config.connect_args(with_database=with_database))

    @property
    def database(self) -> str:
        return self.config.database

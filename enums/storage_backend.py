from enum import Enum


class StorageBackendType(str, Enum):
    SQL = "sql"        # Relational backend (SQLAlchemy)
    LOCAL = "local"    # JSON key-value file, mirrors browser local storage

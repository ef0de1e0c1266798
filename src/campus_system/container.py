from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from .auth.tokens import Authenticator, JWTAuthenticator
from .database.connection import DBConfig, DatabaseConnection
from .entities.catalog import ALL_RESOURCES
from .resources.mysql_repository import MySQLRecordRepository
from .resources.repository import RecordRepository
from .resources.service import ResourceService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    authenticator: Authenticator
    services: Mapping[str, ResourceService]


def build_container(
    *,
    db_config: dict,
    secret_key: str,
    token_ttl_minutes: int,
    repositories: Optional[Mapping[str, RecordRepository]] = None,
    authenticator: Optional[Authenticator] = None,
) -> Container:
    """Wire one service per entity.

    ``repositories`` overrides the MySQL repository per entity name, which is
    how tests swap in in-memory stores.
    """
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
    overrides = dict(repositories or {})

    services: dict[str, ResourceService] = {}
    for resource in ALL_RESOURCES:
        if resource.name in overrides:
            records = overrides[resource.name]
        else:
            records = MySQLRecordRepository(conn, resource)
        services[resource.name] = ResourceService(resource, records)

    return Container(
        conn=conn,
        authenticator=authenticator or JWTAuthenticator(secret_key, ttl_minutes=token_ttl_minutes),
        services=services,
    )

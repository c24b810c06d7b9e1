"""Status page decoders."""

from __future__ import annotations

from typing import Any

from discord_models.core import (
    decode_optional,
    expect_map,
    expect_string,
    required,
    sequence_of,
)
from discord_models.models import (
    AffectedComponent,
    Incident,
    IncidentStatus,
    IncidentUpdate,
    Maintenance,
)


def decode_affected_component(value: Any) -> AffectedComponent:
    data = expect_map(value)
    return AffectedComponent(name=required(data, "name", expect_string))


def decode_incident_update(value: Any) -> IncidentUpdate:
    data = expect_map(value)
    return IncidentUpdate(
        affected_components=required(
            data, "affected_components", sequence_of(decode_affected_component)
        ),
        body=required(data, "body", expect_string),
        created_at=required(data, "created_at", expect_string),
        display_at=required(data, "display_at", expect_string),
        id=required(data, "id", expect_string),
        incident_id=required(data, "incident_id", expect_string),
        status=required(data, "status", IncidentStatus.decode_by_name),
        updated_at=required(data, "updated_at", expect_string),
    )


def decode_incident(value: Any) -> Incident:
    """Convert a status page incident; its own `status` stays a plain string."""
    data = expect_map(value)
    return Incident(
        created_at=required(data, "created_at", expect_string),
        id=required(data, "id", expect_string),
        impact=required(data, "impact", expect_string),
        incident_updates=required(
            data, "incident_updates", sequence_of(decode_incident_update)
        ),
        monitoring_at=decode_optional(data, "monitoring_at", expect_string),
        name=required(data, "name", expect_string),
        page_id=required(data, "page_id", expect_string),
        resolved_at=decode_optional(data, "resolved_at", expect_string),
        short_link=required(data, "short_link", expect_string),
        status=required(data, "status", expect_string),
        updated_at=required(data, "updated_at", expect_string),
    )


def decode_maintenance(value: Any) -> Maintenance:
    data = expect_map(value)
    return Maintenance(
        description=required(data, "description", expect_string),
        id=required(data, "id", expect_string),
        name=required(data, "name", expect_string),
        start=required(data, "start", expect_string),
        stop=required(data, "stop", expect_string),
    )

"""Status page records: incidents and scheduled maintenances."""

from __future__ import annotations

from dataclasses import dataclass

from discord_models.models.enums import IncidentStatus


@dataclass(frozen=True)
class AffectedComponent:
    name: str


@dataclass(frozen=True)
class IncidentUpdate:
    affected_components: list[AffectedComponent]
    body: str
    created_at: str
    display_at: str
    id: str
    incident_id: str
    status: IncidentStatus
    updated_at: str


@dataclass(frozen=True)
class Incident:
    created_at: str
    id: str
    impact: str
    incident_updates: list[IncidentUpdate]
    monitoring_at: str | None
    name: str
    page_id: str
    resolved_at: str | None
    short_link: str
    status: str
    updated_at: str

    @property
    def latest_update(self) -> IncidentUpdate | None:
        return self.incident_updates[0] if self.incident_updates else None


@dataclass(frozen=True)
class Maintenance:
    description: str
    id: str
    name: str
    start: str
    stop: str

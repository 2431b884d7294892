from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from contentdesk.domain.entities import Role


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class RbacRules(BaseModel):
    roles: dict[str, list[str]]

class AbacRule(BaseModel):
    if_condition: dict[str, Any] = Field(alias="if")
    allow: list[str]

    model_config = ConfigDict(populate_by_name=True)

class AbacRules(BaseModel):
    content_rules: list[AbacRule] = Field(default_factory=list)

class SchedulingRules(BaseModel):
    advance_cursor_on_skip: bool = False
    default_interval_days: int = Field(default=1, ge=1)
    default_start_hour: int = Field(default=9, ge=0, le=23)

class LibraryRules(BaseModel):
    unknown_author_label: str = "unknown author"

class NotificationRules(BaseModel):
    history_limit: int = Field(default=50, ge=1)

class SeedUser(BaseModel):
    id: str
    email: str
    display_name: str = ""
    role: Role

class DirectoryRules(BaseModel):
    users: list[SeedUser] = Field(default_factory=list)

class Rules(BaseModel):
    project: ProjectRules
    rbac: RbacRules
    abac: AbacRules = Field(default_factory=AbacRules)
    scheduling: SchedulingRules = Field(default_factory=SchedulingRules)
    library: LibraryRules = Field(default_factory=LibraryRules)
    notifications: NotificationRules = Field(default_factory=NotificationRules)
    directory: DirectoryRules = Field(default_factory=DirectoryRules)

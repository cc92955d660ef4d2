"""Configuration entities: commands, jobs, orbs, retention and workflows."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Optional

from .executors import BaseExecutor, DockerExecutor, MachineExecutor, MacOSExecutor
from .lsptypes import (
    CompletionItem,
    CompletionItemKind,
    Diagnostic,
    DiagnosticSeverity,
    Range,
    TextAndRange,
)
from .parameters import Parameter, ParameterValue, Step

_CACHES_DURATION = re.compile(r"[+-]?[0-9]+")


@dataclass
class Command:
    """A reusable command declared under ``commands``."""

    range: Range = field(default_factory=Range)
    name: str = ""
    name_range: Range = field(default_factory=Range)
    description: str = ""
    description_range: Range = field(default_factory=Range)
    steps: list[Step] = field(default_factory=list)
    steps_range: Range = field(default_factory=Range)
    parameters: dict[str, Parameter] = field(default_factory=dict)
    parameters_range: Range = field(default_factory=Range)
    contexts: list[str] = field(default_factory=list)


@dataclass
class RetentionSettings:
    """The ``retention`` block of a job."""

    caches: TextAndRange = field(default_factory=TextAndRange)
    range: Range = field(default_factory=Range)

    def validate_caches_duration(self) -> bool:
        """Tell whether the caches duration is absent or between 1d and 15d."""
        text = self.caches.text
        if not text:
            return True
        if len(text) < 2 or not text.endswith("d"):
            return False
        amount = text[:-1]
        if not _CACHES_DURATION.fullmatch(amount):
            return False
        return 1 <= int(amount) <= 15

    def validate_caches(self) -> list[Diagnostic]:
        """Diagnostics for an invalid caches duration, if any."""
        if self.caches.text and not self.validate_caches_duration():
            return [
                Diagnostic(
                    range=self.caches.range,
                    message="Retention caches duration must be between 1d and 15d",
                    severity=DiagnosticSeverity.ERROR,
                )
            ]
        return []


@dataclass
class Job:
    """A job declared under ``jobs``."""

    range: Range = field(default_factory=Range)
    name: str = ""
    name_range: Range = field(default_factory=Range)
    shell: str = ""
    working_directory: str = ""
    # -1 means that no parallelism was given.
    parallelism: int = -1
    parallelism_range: Range = field(default_factory=Range)
    resource_class: str = ""
    resource_class_range: Range = field(default_factory=Range)
    steps: Optional[list[Step]] = None
    steps_range: Range = field(default_factory=Range)
    description: str = ""
    executor: str = ""
    executor_parameters: dict[str, ParameterValue] = field(default_factory=dict)
    executor_range: Range = field(default_factory=Range)
    parameters: dict[str, Parameter] = field(default_factory=dict)
    parameters_range: Range = field(default_factory=Range)
    docker: DockerExecutor = field(default_factory=DockerExecutor)
    docker_range: Range = field(default_factory=Range)
    environment: dict[str, str] = field(default_factory=dict)
    environment_range: Range = field(default_factory=Range)
    contexts: list[str] = field(default_factory=list)
    machine: MachineExecutor = field(default_factory=MachineExecutor)
    machine_range: Range = field(default_factory=Range)
    macos: MacOSExecutor = field(default_factory=MacOSExecutor)
    macos_range: Range = field(default_factory=Range)
    retention: RetentionSettings = field(default_factory=RetentionSettings)
    retention_range: Range = field(default_factory=Range)
    completion_items: list[CompletionItem] = field(default_factory=list)

    def add_completion_item(self, label: str, commit_characters: list[str]) -> None:
        """Offer ``label`` as a missing key, followed by the commit characters."""
        self.completion_items.append(
            CompletionItem(
                label=label,
                kind=CompletionItemKind.PROPERTY,
                insert_text=label + "".join(commit_characters),
            )
        )


@dataclass
class OrbURL:
    """Where an orb comes from: a registry reference or a local definition."""

    is_local: bool = False
    name: str = ""
    version: str = ""

    def orb_id(self) -> str:
        """The identifier used to look the orb up."""
        if self.is_local:
            return self.name
        return f"{self.name}@{self.version}"


@dataclass
class OrbURLDefinition:
    """The namespace, name and version of an orb reference, with their ranges."""

    namespace: TextAndRange = field(default_factory=TextAndRange)
    name: TextAndRange = field(default_factory=TextAndRange)
    version: TextAndRange = field(default_factory=TextAndRange)


@dataclass
class Orb:
    """An orb imported under ``orbs``."""

    url: OrbURL = field(default_factory=OrbURL)
    name: str = ""
    range: Range = field(default_factory=Range)
    name_range: Range = field(default_factory=Range)
    version_range: Range = field(default_factory=Range)
    value_range: Range = field(default_factory=Range)
    value_node: Any = None


@dataclass
class RemoteOrbInfo:
    id: str = ""
    file_path: str = ""
    version: str = ""
    latest_version: str = ""
    latest_minor_version: str = ""
    latest_patch_version: str = ""


@dataclass
class OrbParsedAttributes:
    """What parsing an orb's source yields."""

    uri: str = ""
    name: str = ""
    commands: dict[str, Command] = field(default_factory=dict)
    jobs: dict[str, Job] = field(default_factory=dict)
    executors: dict[str, BaseExecutor] = field(default_factory=dict)
    pipeline_parameters: dict[str, Parameter] = field(default_factory=dict)
    executors_range: Range = field(default_factory=Range)
    commands_range: Range = field(default_factory=Range)
    jobs_range: Range = field(default_factory=Range)
    pipeline_parameters_range: Range = field(default_factory=Range)
    workflow_range: Range = field(default_factory=Range)
    orbs_range: Range = field(default_factory=Range)


@dataclass
class OrbInfo(OrbParsedAttributes):
    """A parsed orb together with what is known about its origin."""

    is_local: bool = False
    created_at: str = ""
    description: str = ""
    source: str = ""
    remote_info: RemoteOrbInfo = field(default_factory=RemoteOrbInfo)


@dataclass
class Require:
    name: str = ""
    status: list[str] = field(default_factory=list)
    range: Range = field(default_factory=Range)


@dataclass
class JobRef:
    """A job as it is called from a workflow."""

    job_ref_range: Range = field(default_factory=Range)
    # The job that runs.
    job_name: str = ""
    job_name_range: Range = field(default_factory=Range)
    # The name of this call inside the workflow.
    step_name: str = ""
    step_name_range: Range = field(default_factory=Range)
    requires: list[Require] = field(default_factory=list)
    context: list[TextAndRange] = field(default_factory=list)
    type: str = ""
    type_range: Range = field(default_factory=Range)
    parameters: dict[str, ParameterValue] = field(default_factory=dict)
    serial_group: str = ""
    serial_group_range: Range = field(default_factory=Range)
    override_with: str = ""
    override_with_range: Range = field(default_factory=Range)
    pre_steps: list[Step] = field(default_factory=list)
    pre_steps_range: Range = field(default_factory=Range)
    post_steps: list[Step] = field(default_factory=list)
    post_steps_range: Range = field(default_factory=Range)
    has_matrix: bool = False
    matrix_params: dict[str, list[ParameterValue]] = field(default_factory=dict)


@dataclass
class BranchesFilter:
    range: Range = field(default_factory=Range)
    only: list[str] = field(default_factory=list)
    only_range: Range = field(default_factory=Range)
    ignore: list[str] = field(default_factory=list)
    ignore_range: Range = field(default_factory=Range)


@dataclass
class WorkflowFilters:
    range: Range = field(default_factory=Range)
    branches: BranchesFilter = field(default_factory=BranchesFilter)


@dataclass
class ScheduleTrigger:
    cron: str = ""
    filters: WorkflowFilters = field(default_factory=WorkflowFilters)
    range: Range = field(default_factory=Range)


@dataclass
class WorkflowTrigger:
    schedule: ScheduleTrigger = field(default_factory=ScheduleTrigger)
    range: Range = field(default_factory=Range)


@dataclass
class Workflow:
    """A workflow declared under ``workflows``."""

    range: Range = field(default_factory=Range)
    name: str = ""
    name_range: Range = field(default_factory=Range)
    jobs_range: Range = field(default_factory=Range)
    job_refs: list[JobRef] = field(default_factory=list)
    # Maps each job reference to the references it requires.
    jobs_dag: dict[str, list[str]] = field(default_factory=dict)
    has_trigger: bool = False
    triggers: list[WorkflowTrigger] = field(default_factory=list)
    triggers_range: Range = field(default_factory=Range)
    max_auto_reruns: int = 0
    max_auto_reruns_range: Range = field(default_factory=Range)
    has_max_auto_reruns: bool = False
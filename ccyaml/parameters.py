"""Parameter definitions, parameter values and pipeline steps."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional

from .lsptypes import Range


@dataclass
class ParameterValue:
    """A value given to a parameter, as written in the configuration."""

    name: str = ""
    value: Any = None
    value_range: Range = field(default_factory=Range)
    range: Range = field(default_factory=Range)
    type: str = ""
    node: Any = None


@dataclass
class Parameter:
    """Common part of every parameter definition."""

    type_name: ClassVar[str] = ""

    name: str = ""
    name_range: Range = field(default_factory=Range)
    range: Range = field(default_factory=Range)
    has_default: bool = False
    description: str = ""
    type_range: Range = field(default_factory=Range)
    default_range: Range = field(default_factory=Range)

    def is_optional(self) -> bool:
        """A parameter with a default value may be left out."""
        return self.has_default


@dataclass
class StringParameter(Parameter):
    type_name: ClassVar[str] = "string"
    default: str = ""


@dataclass
class BooleanParameter(Parameter):
    type_name: ClassVar[str] = "boolean"
    default: bool = False


@dataclass
class IntegerParameter(Parameter):
    type_name: ClassVar[str] = "integer"
    default: int = 0


@dataclass
class EnumParameter(Parameter):
    type_name: ClassVar[str] = "enum"
    default: str = ""
    enum: list[str] = field(default_factory=list)


@dataclass
class ExecutorParameter(Parameter):
    type_name: ClassVar[str] = "executor"
    default: str = ""


@dataclass
class StepsParameter(Parameter):
    type_name: ClassVar[str] = "steps"
    default: Optional[ParameterValue] = None


@dataclass
class EnvVariableParameter(Parameter):
    type_name: ClassVar[str] = "env_var_name"
    default: str = ""


@dataclass
class Step:
    """Common part of every step of a job or a command."""

    keyword: ClassVar[str] = ""

    range: Range = field(default_factory=Range)

    def title(self) -> str:
        """The name under which the step is shown."""
        return self.keyword


@dataclass
class NamedStep(Step):
    """A call to a command or an orb command by name."""

    name: str = ""
    parameters: dict[str, ParameterValue] = field(default_factory=dict)
    parameters_range: Range = field(default_factory=Range)

    def title(self) -> str:
        return self.name


@dataclass
class Steps(Step):
    """A nested list of steps, such as a steps parameter."""

    name: str = ""
    parameters: dict[str, ParameterValue] = field(default_factory=dict)
    parameters_range: Range = field(default_factory=Range)
    steps: list[Step] = field(default_factory=list)

    def title(self) -> str:
        return self.name


@dataclass
class Run(Step):
    command: str = ""
    command_range: Range = field(default_factory=Range)
    raw_command: str = ""
    name: str = ""
    shell: str = ""
    background: bool = False
    working_directory: str = ""
    no_output_timeout: str = ""
    when: str = ""
    when_range: Range = field(default_factory=Range)
    environment: dict[str, str] = field(default_factory=dict)
    is_deploy_step: bool = False
    max_auto_reruns: str = ""
    auto_rerun_delay: str = ""

    def title(self) -> str:
        """The explicit name if there is one, else the command itself."""
        if self.name:
            return self.name
        return "run: " + self.command


@dataclass
class Checkout(Step):
    keyword: ClassVar[str] = "checkout"
    path: str = ""


@dataclass
class SetupRemoteDocker(Step):
    keyword: ClassVar[str] = "setup_remote_docker"
    docker_layer_caching: bool = False
    version: str = ""


@dataclass
class SaveCache(Step):
    keyword: ClassVar[str] = "save_cache"
    paths: list[str] = field(default_factory=list)
    key: str = ""
    cache_name: str = ""


@dataclass
class RestoreCache(Step):
    keyword: ClassVar[str] = "restore_cache"
    key: str = ""
    keys: list[str] = field(default_factory=list)
    cache_name: str = ""


@dataclass
class StoreArtifacts(Step):
    keyword: ClassVar[str] = "store_artifacts"
    path: str = ""
    destination: str = ""


@dataclass
class StoreTestResults(Step):
    keyword: ClassVar[str] = "store_test_results"
    path: str = ""


@dataclass
class PersistToWorkspace(Step):
    keyword: ClassVar[str] = "persist_to_workspace"
    root: str = ""
    paths: list[str] = field(default_factory=list)


@dataclass
class AttachWorkspace(Step):
    keyword: ClassVar[str] = "attach_workspace"
    at: str = ""


@dataclass
class AddSSHKey(Step):
    keyword: ClassVar[str] = "add_ssh_key"
    fingerprints: list[str] = field(default_factory=list)
"""Executor definitions: docker, machine and macOS."""

from __future__ import annotations

from dataclasses import dataclass, field

from .lsptypes import Range
from .parameters import Parameter


@dataclass
class Environment:
    """Names of the environment variables set by an executor."""

    range: Range = field(default_factory=Range)
    keys: list[str] = field(default_factory=list)


@dataclass
class ExecutableParameters:
    description: str = ""
    shell: str = ""
    working_directory: str = ""


@dataclass
class BaseExecutor:
    """What every executor has, whatever it runs on."""

    name: str = ""
    name_range: Range = field(default_factory=Range)
    range: Range = field(default_factory=Range)
    resource_class: str = ""
    resource_class_range: Range = field(default_factory=Range)
    built_in_parameters: ExecutableParameters = field(default_factory=ExecutableParameters)
    user_parameters: dict[str, Parameter] = field(default_factory=dict)
    user_parameters_range: Range = field(default_factory=Range)
    incomplete: bool = False
    environment: Environment = field(default_factory=Environment)


@dataclass
class DockerImageInfo:
    """The parts of a docker image reference."""

    namespace: str = ""
    name: str = ""
    tag: str = ""
    digest: str = ""
    full_path: str = ""


@dataclass
class DockerImageAuth:
    username: str = ""
    password: str = ""


@dataclass
class DockerImageAWSAuth:
    aws_access_key_id: str = ""
    aws_secret_access_key: str = ""


@dataclass
class DockerImage:
    """One image entry of a docker executor."""

    image: DockerImageInfo = field(default_factory=DockerImageInfo)
    image_range: Range = field(default_factory=Range)
    name: str = ""
    entrypoint: list[str] = field(default_factory=list)
    command: list[str] = field(default_factory=list)
    user: str = ""
    environment: dict[str, str] = field(default_factory=dict)
    auth: DockerImageAuth = field(default_factory=DockerImageAuth)
    aws_auth: DockerImageAWSAuth = field(default_factory=DockerImageAWSAuth)


@dataclass
class DockerExecutor(BaseExecutor):
    image: list[DockerImage] = field(default_factory=list)
    service_images: list[DockerImage] = field(default_factory=list)


@dataclass
class MachineExecutor(BaseExecutor):
    image: str = ""
    image_range: Range = field(default_factory=Range)
    docker_layer_caching: bool = False
    machine: bool = False
    # Set when the executor is written as `machine: true`.
    is_deprecated: bool = False


@dataclass
class MacOSExecutor(BaseExecutor):
    xcode: str = ""
    xcode_range: Range = field(default_factory=Range)
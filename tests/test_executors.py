import dataclasses

from ccyaml.executors import (
    BaseExecutor,
    DockerExecutor,
    DockerImage,
    DockerImageAuth,
    DockerImageAWSAuth,
    DockerImageInfo,
    Environment,
    ExecutableParameters,
    MachineExecutor,
    MacOSExecutor,
)
from ccyaml.lsptypes import Position, Range
from ccyaml.parameters import StringParameter


def test_docker_executor_holds_images():
    password = "password"
    image = DockerImage(
        image=DockerImageInfo(
            namespace="cimg", name="ruby", tag="3.0.3-browsers", full_path="cimg/ruby:3.0.3-browsers"
        ),
        auth=DockerImageAuth(username="mydockerhub-user", password=password),
        environment={"IN_CI": "true"},
    )
    executor = DockerExecutor(name="docker-executor", image=[image])
    assert executor.image[0].image.full_path == "cimg/ruby:3.0.3-browsers"
    assert executor.image[0].auth.username == "mydockerhub-user"
    assert executor.service_images == []


def test_mutable_defaults_are_not_shared():
    first = DockerExecutor()
    second = DockerExecutor()
    first.image.append(DockerImage())
    first.environment.keys.append("AWS_ECR_REGISTRY_ID")
    assert second.image == []
    assert second.environment.keys == []


def test_machine_executor_fields():
    machine = MachineExecutor(
        name="machine-executor",
        image="ubuntu-2004:current",
        docker_layer_caching=True,
        resource_class="large",
        environment=Environment(keys=["AWS_ECR_REGISTRY_ID"]),
    )
    assert machine.image == "ubuntu-2004:current"
    assert machine.docker_layer_caching
    assert not machine.is_deprecated
    assert machine.environment.keys == ["AWS_ECR_REGISTRY_ID"]


def test_macos_executor_with_user_parameters():
    param = StringParameter(name="dummyParam", default="dummy", has_default=True)
    macos = MacOSExecutor(
        name="macos-executor",
        xcode="11.3.1",
        resource_class="large",
        user_parameters={"dummyParam": param},
    )
    assert macos.user_parameters["dummyParam"].is_optional()
    assert macos.xcode == "11.3.1"


def test_executors_compare_by_value():
    rng = Range(Position(10, 4), Position(10, 20))
    assert MachineExecutor(name="m", name_range=rng) == MachineExecutor(name="m", name_range=rng)
    assert MachineExecutor(name="m") != MacOSExecutor(name="m")


def test_resource_class_range_can_be_widened():
    base = BaseExecutor(resource_class_range=Range(Position(14, 8), Position(14, 29)))
    wider = dataclasses.replace(
        base.resource_class_range,
        end=dataclasses.replace(base.resource_class_range.end, character=999),
    )
    base.resource_class_range = wider
    assert base.resource_class_range.end.character == 999
    assert base.resource_class_range.start == Position(14, 8)


def test_incomplete_executor_flag_and_builtins():
    base = BaseExecutor(incomplete=True, built_in_parameters=ExecutableParameters(shell="/bin/bash"))
    assert base.incomplete
    assert base.built_in_parameters.shell == "/bin/bash"
    assert BaseExecutor().incomplete is False


def test_aws_auth_fields():
    auth = DockerImageAWSAuth(aws_access_key_id="placeholder", aws_secret_access_key="secret")
    assert (auth.aws_access_key_id, auth.aws_secret_access_key) == ("placeholder", "secret")
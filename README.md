# ccyaml

Building blocks for tools that read and check CircleCI configuration files.

The package provides:

- **LSP-style positions, ranges and diagnostics** (`ccyaml.lsptypes`):
  `Position`, `Range` (with `Range.contains`), `Diagnostic`,
  `DiagnosticSeverity`, `DiagnosticTag`, `CompletionItem`,
  `CompletionItemKind` and `TextAndRange`, along with the helpers
  `pos_in_range` and `ranges_equal`.
- **A configuration model** as dataclasses:
  - `ccyaml.parameters`: parameter definitions (`StringParameter`,
    `BooleanParameter`, `IntegerParameter`, `EnumParameter`,
    `ExecutorParameter`, `StepsParameter`, `EnvVariableParameter`),
    `ParameterValue`, and the step types (`Run`, `Checkout`, `SaveCache`,
    `RestoreCache`, `NamedStep` and the rest). Each step has a `title()`.
  - `ccyaml.executors`: `DockerExecutor`, `MachineExecutor`,
    `MacOSExecutor`, `DockerImage` and `DockerImageInfo`.
  - `ccyaml.model`: `Command`, `Job`, `Orb`, `OrbURL`, `OrbInfo`,
    `RetentionSettings`, `Workflow`, `JobRef` and the trigger and filter
    types.
- **Value parsers**:
  - `ccyaml.dockerimage.parse_docker_image_value` splits an image reference
    such as `cimg/node:22.11.0@sha256:...` into its namespace, name, tag and
    digest. A leading YAML anchor (`&name `) is dropped first.
  - `ccyaml.orburl` reads orb references such as `circleci/go@1.7.1`:
    `parse_orb_url`, `orb_version_range` and
    `orb_definition_from_text_and_range`.
- **Diagnostic assertions for tests** (`ccyaml.expect`): diagnostics are
  compared by severity, message, code and range. The `assert_*` functions
  raise `AssertionError` with a readable listing when they fail.
- **A Docker Hub client** (`ccyaml.dockerhub`): search the repositories of a
  namespace by name prefix, page through the tags of a repository, and check
  whether an image or a tag exists. Network and decoding failures while
  fetching pages raise `DockerHubError`.

## Installation

```
pip install ccyaml
```

## Examples

Parse a Docker image reference:

```python
from ccyaml.dockerimage import parse_docker_image_value

info = parse_docker_image_value("cimg/go:1.24")
print(info.namespace, info.name, info.tag)   # cimg go 1.24
```

Images with no namespace fall under `library`.

Read an orb reference:

```python
from ccyaml.orburl import parse_orb_url

url = parse_orb_url("circleci/go@1.7.1")
print(url.name, url.version, url.orb_id())   # circleci/go 1.7.1 circleci/go@1.7.1
```

An orb reference without a version gets the version `volatile`.

Check cache retention settings:

```python
from ccyaml.lsptypes import TextAndRange
from ccyaml.model import RetentionSettings

settings = RetentionSettings(caches=TextAndRange(text="30d"))
print(settings.validate_caches_duration())   # False: must be 1d to 15d
print(settings.validate_caches()[0].message)
```

Assert on diagnostics in a test:

```python
from ccyaml.expect import assert_includes
from ccyaml.lsptypes import Diagnostic, DiagnosticSeverity

found = [Diagnostic(message="Job already defined", severity=DiagnosticSeverity.WARNING)]
assert_includes(found, Diagnostic(message="Job already defined",
                                  severity=DiagnosticSeverity.WARNING))
```

Query Docker Hub:

```python
from ccyaml.dockerhub import DockerHubAPI, search, search_tags

api = DockerHubAPI()
print(api.does_image_exist("cimg", "node"))
print(api.image_has_tag("cimg", "node", "lts"))

cursor = search("cimg/no")
while cursor.has_next():
    print(cursor.next().name)

tags = search_tags("cimg", "node", "22")
while tags.has_next():
    tag = tags.next()
    if tag is None:
        break
    print(tag.name)
```

## Command line

`ccyaml-dockerhub` prints every repository of the `cimg` namespace on Docker
Hub, then prints `true` or `false` for whether the image `cimg/node1`
exists. If no repository is found it prints `No images found` and exits
with status 1.

```
ccyaml-dockerhub
```

It needs network access to Docker Hub.

## What the package does not do

The package holds the model that a configuration checker works with, but it
does not read a configuration file into that model: there is no YAML parser
that builds `Job`, `Command` or `Workflow` objects, no schema validation and
no language server. Those objects are built by the caller.

## Running the tests

```
pip install ccyaml[test]
pytest
```
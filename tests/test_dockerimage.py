import pytest

from ccyaml.dockerimage import parse_docker_image_value
from ccyaml.executors import DockerImageInfo

SHA_CIMG = "sha256:76aae59c6259672ab68819b8960de5ef571394681089eab2b576f85f080c73ba"
SHA_LIB = "sha256:abcdef1234567890abcdef1234567890abcdef1234567890abcdef1234567890"
HEX = "abcdef1234567890abcdef1234567890abcdef1234567890abcdef1234567890"
NON_HEX = "sha256:ghijklmnopqrstuvwxyz1234567890abcdef1234567890abcdef1234567890"

CASES = [
    ("node", DockerImageInfo("library", "node", "", "", "node")),
    ("node:", DockerImageInfo("library", "node", "", "", "node:")),
    ("node:12", DockerImageInfo("library", "node", "12", "", "node:12")),
    ("node:latest", DockerImageInfo("library", "node", "latest", "", "node:latest")),
    ("cimg/go:latest", DockerImageInfo("cimg", "go", "latest", "", "cimg/go:latest")),
    ("cimg/go", DockerImageInfo("cimg", "go", "", "", "cimg/go")),
    ("cimg/go:", DockerImageInfo("cimg", "go", "", "", "cimg/go:")),
    (
        "cimg/go:<<parameters.go_version>>",
        DockerImageInfo(
            "cimg", "go", "<<parameters.go_version>>", "", "cimg/go:<<parameters.go_version>>"
        ),
    ),
    (
        "cimg/node@" + SHA_CIMG,
        DockerImageInfo("cimg", "node", "", SHA_CIMG, "cimg/node@" + SHA_CIMG),
    ),
    (
        "cimg/node:22.11.0@" + SHA_CIMG,
        DockerImageInfo("cimg", "node", "22.11.0", SHA_CIMG, "cimg/node:22.11.0@" + SHA_CIMG),
    ),
    (
        "node:18@" + SHA_LIB,
        DockerImageInfo("library", "node", "18", SHA_LIB, "node:18@" + SHA_LIB),
    ),
    (
        "node@" + SHA_LIB,
        DockerImageInfo("library", "node", "", SHA_LIB, "node@" + SHA_LIB),
    ),
    ("cimg/go:1.24@foo", DockerImageInfo("cimg", "go", "1.24", "foo", "cimg/go:1.24@foo")),
    (
        "cimg/node:18@" + HEX,
        DockerImageInfo("cimg", "node", "18", HEX, "cimg/node:18@" + HEX),
    ),
    (
        "cimg/go:latest@sha256:abc123",
        DockerImageInfo("cimg", "go", "latest", "sha256:abc123", "cimg/go:latest@sha256:abc123"),
    ),
    (
        "node:alpine@" + NON_HEX,
        DockerImageInfo("library", "node", "alpine", NON_HEX, "node:alpine@" + NON_HEX),
    ),
]


@pytest.mark.parametrize("value, expected", CASES)
def test_parse_docker_image_value(value, expected):
    assert parse_docker_image_value(value) == expected


def test_anchor_prefix_is_removed():
    info = parse_docker_image_value("&image cimg/go:1.20")
    assert info == DockerImageInfo("cimg", "go", "1.20", "", "cimg/go:1.20")


def test_unmatched_value_falls_back_to_library():
    info = parse_docker_image_value("Not/An/Image")
    assert info == DockerImageInfo("library", "", "", "", "Not/An/Image")


def test_trailing_newline_does_not_match():
    info = parse_docker_image_value("node\n")
    assert info.name == ""
    assert info.full_path == "node\n"
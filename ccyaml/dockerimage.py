"""Splitting a docker image reference into its parts."""

from __future__ import annotations

import re

from .executors import DockerImageInfo

_DOCKER_IMAGE = re.compile(r"([a-z0-9\-_]+/)?([a-z0-9\-_]+)(:([^@]*))?(@(.+))?")
_ANCHOR_PREFIX = re.compile(r"^&[a-zA-Z0-9\-_]+[\t\n\f\r ]*")


def parse_docker_image_value(value: str) -> DockerImageInfo:
    """Read namespace, name, tag and digest out of an image reference.

    A leading YAML anchor is dropped first. Images without a namespace
    belong to ``library``.
    """
    value = _ANCHOR_PREFIX.sub("", value, count=1)
    match = _DOCKER_IMAGE.fullmatch(value)
    if match is None:
        return DockerImageInfo(namespace="library", full_path=value)

    namespace = match.group(1)
    namespace = namespace[:-1] if namespace else "library"
    return DockerImageInfo(
        namespace=namespace,
        name=match.group(2) or "",
        tag=match.group(4) or "",
        digest=match.group(6) or "",
        full_path=value,
    )
"""Command that lists the images of a Docker Hub namespace."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .dockerhub import DockerHubAPI, search


def main(argv: Optional[Sequence[str]] = None) -> int:
    """List the ``cimg`` images and check whether ``cimg/node1`` exists."""
    parser = argparse.ArgumentParser(
        prog="ccyaml-dockerhub",
        description="List the cimg images published on Docker Hub.",
    )
    parser.parse_args(argv)

    results = search("cimg/")
    if not results.has_next():
        print("No images found")
        return 1

    while results.has_next():
        print(results.next())

    print(str(DockerHubAPI().does_image_exist("cimg", "node1")).lower())
    return 0
"""Reading orb references such as ``namespace/name@version``."""

from __future__ import annotations

from .lsptypes import Position, Range, TextAndRange
from .model import OrbURL, OrbURLDefinition


def parse_orb_url(orb_url: str) -> OrbURL:
    """Split a registry orb reference into name and version.

    Without a version the orb is taken as ``volatile``.
    """
    parts = orb_url.split("@")
    if len(parts) > 1:
        return OrbURL(name=parts[0], version=parts[1], is_local=False)
    return OrbURL(name=parts[0], version="volatile", is_local=False)


def orb_version_range(orb_text: str, orb_range: Range) -> Range:
    """The range of the version part of an orb reference, or an empty range."""
    at_index = orb_text.find("@")
    if at_index == -1:
        return Range()
    start = orb_range.start
    return Range(
        start=Position(start.line, start.character + at_index + 1),
        end=orb_range.end,
    )


def orb_definition_from_text_and_range(orb_text: str, orb_range: Range) -> OrbURLDefinition:
    """Locate namespace, name and version of an orb reference.

    Parts missing at the end of the text are left empty.
    """
    definition = OrbURLDefinition()
    start = orb_range.start

    end_of_ns = orb_text.find("/")
    if end_of_ns == -1:
        end_of_ns = len(orb_text)
    ns_end = Position(start.line, start.character + end_of_ns)
    definition.namespace = TextAndRange(orb_text[:end_of_ns], Range(start, ns_end))
    if end_of_ns == len(orb_text):
        return definition

    end_of_name = orb_text.find("@")
    if end_of_name == -1:
        end_of_name = len(orb_text)
    if end_of_name < end_of_ns + 1:
        raise ValueError(f"malformed orb reference: {orb_text!r}")
    name_end = Position(start.line, start.character + end_of_name)
    definition.name = TextAndRange(
        orb_text[end_of_ns + 1 : end_of_name],
        Range(Position(ns_end.line, ns_end.character + 1), name_end),
    )
    if end_of_name == len(orb_text):
        return definition

    definition.version = TextAndRange(
        orb_text[end_of_name + 1 :],
        Range(Position(name_end.line, name_end.character + 1), orb_range.end),
    )
    return definition
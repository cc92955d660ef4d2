"""Comparing diagnostics and asserting on lists of them."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .lsptypes import Diagnostic, ranges_equal


def are_diagnostics_equivalent(a: Diagnostic, b: Diagnostic) -> bool:
    """Same severity, message, code and range."""
    return (
        a.severity == b.severity
        and a.message == b.message
        and a.code == b.code
        and ranges_equal(a.range, b.range)
    )


def list_has_diagnostic(diagnostics: Iterable[Diagnostic], diagnostic: Diagnostic) -> bool:
    """Tell whether an equivalent diagnostic is in ``diagnostics``."""
    return any(are_diagnostics_equivalent(d, diagnostic) for d in diagnostics)


def diagnostic_info(diagnostic: Diagnostic) -> str:
    """A one-line description of a diagnostic."""
    rng = diagnostic.range
    severity = "" if diagnostic.severity is None else str(diagnostic.severity)
    return (
        f"<L{rng.start.line}:{rng.start.character},"
        f"L{rng.end.line}:{rng.end.character}> {severity}: {diagnostic.message}"
    )


def diagnostic_info_list(diagnostics: Iterable[Diagnostic], prefix: str) -> str:
    """Every diagnostic's description, each preceded by ``prefix``."""
    return "".join(prefix + diagnostic_info(d) for d in diagnostics)


def assert_diagnostic_equal(actual: Diagnostic, expected: Diagnostic) -> None:
    if are_diagnostics_equivalent(actual, expected):
        return
    raise AssertionError(
        "Expecting diagnostics to be equal.\n"
        f"Expected: {diagnostic_info(expected)}\n"
        f"Actual: {diagnostic_info(actual)}\n"
    )


def assert_diagnostic_not_equal(actual: Diagnostic, expected: Diagnostic) -> None:
    if not are_diagnostics_equivalent(actual, expected):
        return
    raise AssertionError(
        "Expecting diagnostics to be different.\n"
        f"Expected: {diagnostic_info(expected)}\n"
        f"Actual: {diagnostic_info(actual)}\n"
    )


def assert_empty(diagnostics: Sequence[Diagnostic]) -> None:
    if not diagnostics:
        return
    listing = diagnostic_info_list(diagnostics, "\n\t")
    raise AssertionError(f"Diagnostic list expected to be empty.\nList:\n{listing}\n")


def assert_not_empty(diagnostics: Sequence[Diagnostic]) -> None:
    if diagnostics:
        return
    raise AssertionError("Diagnostic list expected to not be empty.")


def assert_includes(diagnostics: Sequence[Diagnostic], diagnostic: Diagnostic) -> None:
    if list_has_diagnostic(diagnostics, diagnostic):
        return
    listing = diagnostic_info_list(diagnostics, "\n\t")
    raise AssertionError(
        "Diagnostic not present in list\n"
        f"Expected: \n\t{diagnostic_info(diagnostic)}\n"
        f"List: {listing}\n"
    )


def assert_not_includes(diagnostics: Sequence[Diagnostic], diagnostic: Diagnostic) -> None:
    if not list_has_diagnostic(diagnostics, diagnostic):
        return
    listing = diagnostic_info_list(diagnostics, "\n\t")
    raise AssertionError(
        f"Diagnostic present in list:\n\t{diagnostic_info(diagnostic)}\nList: {listing}\n"
    )


def assert_includes_all(
    diagnostics: Sequence[Diagnostic], expected: Iterable[Diagnostic]
) -> None:
    missing = [d for d in expected if not list_has_diagnostic(diagnostics, d)]
    if not missing:
        return
    raise AssertionError(
        "Diagnostics not present in list\n"
        f"Not found: {diagnostic_info_list(missing, chr(10) + chr(9) * 2 + '- ')}\n"
        f"List: {diagnostic_info_list(diagnostics, chr(10) + chr(9) * 2 + '- ')}"
    )


def assert_not_includes_all(
    diagnostics: Sequence[Diagnostic], expected: Iterable[Diagnostic]
) -> None:
    """Fail when every expected diagnostic is in the list."""
    found = []
    for diagnostic in expected:
        if not list_has_diagnostic(diagnostics, diagnostic):
            return
        found.append(diagnostic)
    raise AssertionError(
        "Diagnostics all present in list\n"
        f"Found: {diagnostic_info_list(found, chr(10) + chr(9) * 2 + '- ')}\n"
        f"List: {diagnostic_info_list(diagnostics, chr(10) + chr(9) * 2 + '- ')}"
    )
import pytest

from ccyaml.lsptypes import (
    CompletionItemKind,
    DiagnosticSeverity,
    Position,
    Range,
    TextAndRange,
)
from ccyaml.model import (
    Command,
    Job,
    OrbInfo,
    OrbParsedAttributes,
    OrbURL,
    RetentionSettings,
    Workflow,
)


def _retention(text):
    rng = Range(Position(3, 4), Position(3, 8))
    return RetentionSettings(caches=TextAndRange(text=text, range=rng))


@pytest.mark.parametrize("text", ["", "1d", "15d", "7d"])
def test_valid_caches_duration(text):
    assert _retention(text).validate_caches_duration() is True


@pytest.mark.parametrize("text", ["0d", "16d", "d", "5", "abcd", "5h", "1.5d"])
def test_invalid_caches_duration(text):
    assert _retention(text).validate_caches_duration() is False


def test_validate_caches_reports_error_on_caches_range():
    settings = _retention("30d")
    diagnostics = settings.validate_caches()
    assert len(diagnostics) == 1
    diag = diagnostics[0]
    assert diag.message == "Retention caches duration must be between 1d and 15d"
    assert diag.severity == DiagnosticSeverity.ERROR
    assert diag.range == settings.caches.range


@pytest.mark.parametrize("text", ["", "3d"])
def test_validate_caches_clean(text):
    assert _retention(text).validate_caches() == []


def test_add_completion_item_joins_commit_characters():
    job = Job(name="build")
    job.add_completion_item("steps", [":", "\n", "\t"])
    job.add_completion_item("shell", [":", " "])
    labels = [item.label for item in job.completion_items]
    assert labels == ["steps", "shell"]
    assert job.completion_items[0].insert_text == "steps" + ":\n\t"
    assert job.completion_items[1].insert_text == "shell" + ": "
    assert all(i.kind == CompletionItemKind.PROPERTY for i in job.completion_items)


def test_jobs_do_not_share_mutable_state():
    first, second = Job(), Job()
    first.add_completion_item("description", [":"])
    first.contexts.append("org-global")
    assert second.completion_items == []
    assert second.contexts == []


def test_job_parallelism_unset_by_default():
    assert Job().parallelism == -1


def test_orb_id_remote():
    url = OrbURL(name="circleci/go", version="1.7.1")
    assert url.orb_id() == "circleci/go" + "@" + "1.7.1"


def test_orb_id_local_is_name_only():
    url = OrbURL(name="localorb", version="ignored", is_local=True)
    assert url.orb_id() == "localorb"


def test_orb_info_carries_parsed_attributes():
    command = Command(name="greet")
    info = OrbInfo(name="local", commands={"greet": command}, is_local=True)
    assert isinstance(info, OrbParsedAttributes)
    assert info.commands["greet"] is command
    assert info.is_local is True


def test_workflow_dag_is_independent():
    a, b = Workflow(name="a"), Workflow(name="b")
    a.jobs_dag["test"] = ["build"]
    assert b.jobs_dag == {}
    assert a.jobs_dag == {"test": ["build"]}
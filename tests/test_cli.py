import pytest
import responses

from ccyaml import dockerhub
from ccyaml.cli import main
from ccyaml.dockerhub import BASE_URL

CIMG_URL = f"{BASE_URL}/namespaces/cimg/repositories"


@pytest.fixture(autouse=True)
def fresh_namespaces():
    dockerhub._clear_namespaces()
    yield
    dockerhub._clear_namespaces()


@pytest.fixture
def hub_mock():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def test_main_lists_images(capsys, hub_mock):
    hub_mock.get(
        CIMG_URL,
        json={"next": None, "results": [{"name": "go"}, {"name": "python"}]},
    )
    hub_mock.get(CIMG_URL + "/node1", status=404, json={})
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert "'go'" in lines[0]
    assert "'python'" in lines[1]
    assert lines[2] == "false"


def test_main_reports_no_images(capsys, hub_mock):
    hub_mock.get(CIMG_URL, json={"next": None, "results": []})
    assert main([]) == 1
    assert capsys.readouterr().out.strip() == "No images found"
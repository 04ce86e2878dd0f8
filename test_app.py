import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient

from dirtree.app import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def mock_fs(tmp_path):
    d = tmp_path / "folder"
    d.mkdir()
    (d / "file1.py").write_text("print('Hello world')", encoding="utf-8")
    (d / "sub").mkdir()
    return d


def test_dirtree_endpoint_tree(client, mock_fs):
    response = client.get("/dirtree", params={"path": str(mock_fs)})
    assert response.status_code == 200
    lines = [line.rstrip() for line in response.json().splitlines()]
    assert lines == [str(mock_fs), "|-sub", "`-file1.py"]


def test_dirtree_endpoint_summary_multiple_paths(client, mock_fs, tmp_path):
    other = tmp_path / "other"
    other.mkdir()
    response = client.get(
        "/dirtree",
        params=[("path", str(mock_fs)), ("path", str(other)), ("summary", "true")],
    )
    assert response.status_code == 200
    text = response.json()
    assert "1 file, 1 directory, 0 links, 0 pipes, and 0 sockets" in text
    assert "0 files, 0 directories, 0 links, 0 pipes, and 0 sockets" in text
    assert "Analyzed 2 directories:" in text


@patch("pwd.getpwuid")
def test_dirtree_endpoint_identity_failure(mock_getpwuid, client, mock_fs):
    mock_getpwuid.side_effect = KeyError()
    response = client.get("/dirtree", params={"path": str(mock_fs), "verbose": "true"})
    assert response.status_code == 500


def test_dirtree_endpoint_undecodable_name(client, tmp_path):
    import os

    os.mkdir(os.path.join(os.fsencode(tmp_path), b"bad\xffname"))
    response = client.get("/dirtree", params={"path": str(tmp_path)})
    assert response.status_code == 200
    assert "`-bad\ufffdname" in response.json()

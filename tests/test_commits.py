import json

import pytest

from edgeapi.models.commits import (
    Commit,
    InstalledPackage,
    Package,
    Repo,
    RepoStatus,
)


@pytest.mark.parametrize(
    "status, expected",
    [
        (RepoStatus.BUILDING, "BUILDING"),
        (RepoStatus.ERROR, "ERROR"),
        (RepoStatus.SUCCESS, "SUCCESS"),
    ],
)
def test_repo_status_values(status, expected):
    assert Repo(url="www.test.com", status=status).to_dict()["RepoStatus"] == expected


def test_repo_json_keys():
    repo = Repo(url="www.test.com", status=RepoStatus.SUCCESS)
    data = repo.to_dict()
    assert data["RepoURL"] == "www.test.com"
    assert data["RepoStatus"] == "SUCCESS"
    assert json.loads(json.dumps(data)) == data


def test_installed_package_omits_empty_epoch():
    pkg = InstalledPackage(name="vim", arch="x86_64", version="8.2")
    data = pkg.to_dict()
    assert "epoch" not in data
    assert data["name"] == "vim"


def test_installed_package_keeps_epoch():
    pkg = InstalledPackage(name="vim", epoch="2")
    assert InstalledPackage.from_dict(pkg.to_dict()) == pkg


def test_commit_omits_empty_installed_packages():
    assert "InstalledPackages" not in Commit(arch="x86_64").to_dict()


def test_commit_round_trip_with_nested_values():
    commit = Commit(
        id=3,
        arch="x86_64",
        os_tree_ref="rhel/8/x86_64/edge",
        build_number=4,
        installed_packages=[InstalledPackage(name="vim"), InstalledPackage(name="wget")],
        repo_id=7,
        repo=Repo(id=7, url="www.test.com"),
    )
    data = json.loads(json.dumps(commit.to_dict()))
    assert data["Repo"]["RepoURL"] == "www.test.com"
    assert Commit.from_dict(data) == commit


def test_commit_from_dict_null_repo_and_packages():
    commit = Commit.from_dict({"Arch": "x86_64", "Repo": None, "InstalledPackages": None})
    assert commit.repo is None
    assert commit.installed_packages == []
    assert commit.arch == "x86_64"


def test_package_round_trip():
    pkg = Package(id=1, name="ansible")
    assert Package.from_dict(pkg.to_dict()) == pkg
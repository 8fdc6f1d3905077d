"""OSTree commits, the repos that deliver them, and their packages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from edgeapi.models.base import Model, _json_field


class RepoStatus(str, Enum):
    """States of a delivery repo."""

    BUILDING = "BUILDING"
    ERROR = "ERROR"
    SUCCESS = "SUCCESS"


@dataclass
class Repo(Model):
    """The delivery mechanism of a commit over HTTP."""

    url: str = _json_field("RepoURL", "")
    status: str = _json_field("RepoStatus", "")


@dataclass
class Package(Model):
    """A package a commit can have."""

    name: str = _json_field("Name", "")


@dataclass
class InstalledPackage(Model):
    """A package installed in an image."""

    name: str = _json_field("name", "")
    arch: str = _json_field("arch", "")
    release: str = _json_field("release", "")
    sigmd5: str = _json_field("sigmd5", "")
    signature: str = _json_field("signature", "")
    type: str = _json_field("type", "")
    version: str = _json_field("version", "")
    epoch: str = _json_field("epoch", "", omitempty=True)


@dataclass
class Commit(Model):
    """An OSTree commit produced by the image builder."""

    name: str = _json_field("Name", "")
    account: str = _json_field("Account", "")
    image_build_hash: str = _json_field("ImageBuildHash", "")
    image_build_parent_hash: str = _json_field("ImageBuildParentHash", "")
    image_build_tar_url: str = _json_field("ImageBuildTarURL", "")
    os_tree_commit: str = _json_field("OSTreeCommit", "")
    os_tree_parent_commit: str = _json_field("OSTreeParentCommit", "")
    os_tree_ref: str = _json_field("OSTreeRef", "")
    build_date: str = _json_field("BuildDate", "")
    build_number: int = _json_field("BuildNumber", 0)
    blueprint_toml: str = _json_field("BlueprintToml", "")
    arch: str = _json_field("Arch", "")
    installed_packages: list[InstalledPackage] = _json_field(
        "InstalledPackages", factory=list, omitempty=True, model=InstalledPackage
    )
    compose_job_id: str = _json_field("ComposeJobID", "")
    status: str = _json_field("Status", "")
    repo_id: int | None = _json_field("RepoID", None)
    repo: Repo | None = _json_field("Repo", None, model=Repo)
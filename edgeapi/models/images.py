"""Images, image sets and installers, with request validation."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from edgeapi.models.base import Model, _json_field
from edgeapi.models.commits import Commit, InstalledPackage, Package
from edgeapi.models.thirdpartyrepo import ThirdPartyRepo

DISTRIBUTION_CANT_BE_NIL_MESSAGE = "distribution can't be empty"
ARCHITECTURE_CANT_BE_EMPTY_MESSAGE = "architecture can't be empty"
NAME_CANT_BE_INVALID_MESSAGE = (
    "name must start with alphanumeric characters and can contain "
    "underscore and hyphen characters"
)
IMAGE_TYPE_NOT_ACCEPTED = "this image type is not accepted"
IMAGE_NAME_ALREADY_EXISTS = "this image name is already in use"
NO_OUTPUT_TYPES = "an output type is required"

IMAGE_TYPE_INSTALLER = "rhel-edge-installer"
IMAGE_TYPE_COMMIT = "rhel-edge-commit"

MISSING_INSTALLER = "installer info must be provided"
MISSING_USERNAME_ERROR = "username must be provided"
MISSING_SSH_KEY_ERROR = "SSH key must be provided"
INVALID_SSH_KEY_ERROR = "SSH Key supports RSA or DSS or ED25519 or ECDSA-SHA2 algorithms"

REQUIRED_PACKAGES = (
    "ansible",
    "rhc",
    "rhc-worker-playbook",
    "subscription-manager",
    "subscription-manager-plugin-ostree",
    "insights-client",
)

_VALID_SSH_PREFIX = re.compile(
    r"(ssh-(rsa|dss|ed25519)|ecdsa-sha2-nistp(256|384|521)) [^\t\n\f\r ]+"
)
_VALID_IMAGE_NAME = re.compile(r"[A-Za-z0-9]+[A-Za-z0-9\t\n\f\r _-]*")
_ACCEPTED_IMAGE_TYPES = frozenset({IMAGE_TYPE_COMMIT, IMAGE_TYPE_INSTALLER})


class ImageStatus(str, Enum):
    """States of an image build."""

    CREATED = "CREATED"
    BUILDING = "BUILDING"
    ERROR = "ERROR"
    SUCCESS = "SUCCESS"
    INTERRUPTED = "INTERRUPTED"


@dataclass
class Installer(Model):
    """An ISO installer built for an image."""

    account: str = _json_field("Account", "")
    image_build_iso_url: str = _json_field("ImageBuildISOURL", "")
    compose_job_id: str = _json_field("ComposeJobID", "")
    status: str = _json_field("Status", "")
    username: str = _json_field("Username", "")
    ssh_key: str = _json_field("SshKey", "")
    checksum: str = _json_field("Checksum", "")


@dataclass
class Image(Model):
    """The request that produces an OSTree commit."""

    name: str = _json_field("Name", "")
    account: str = _json_field("Account", "")
    distribution: str = _json_field("Distribution", "")
    description: str = _json_field("Description", "")
    status: str = _json_field("Status", "")
    version: int = _json_field("Version", 1)
    image_type: str = _json_field("ImageType", "")
    output_types: list[str] = _json_field("OutputTypes", factory=list)
    commit_id: int = _json_field("CommitID", 0)
    commit: Commit | None = _json_field("Commit", None, model=Commit)
    installer_id: int | None = _json_field("InstallerID", None)
    installer: Installer | None = _json_field("Installer", None, model=Installer)
    image_set_id: int | None = _json_field("ImageSetID", None)
    packages: list[Package] = _json_field(
        "Packages", factory=list, omitempty=True, model=Package
    )
    third_party_repositories: list[ThirdPartyRepo] = _json_field(
        "ThirdPartyRepositories", factory=list, omitempty=True, model=ThirdPartyRepo
    )
    custom_packages: list[Package] = _json_field(
        "CustomPackages", factory=list, omitempty=True, model=Package
    )

    def validate_request(
        self, name_in_use: Callable[[str], bool] | None = None
    ) -> None:
        """Raise ValueError if the image request is not acceptable.

        ``name_in_use`` tells whether an image name is already taken; it is
        consulted only for the first version of an image.
        """
        if not self.distribution:
            raise ValueError(DISTRIBUTION_CANT_BE_NIL_MESSAGE)
        if _VALID_IMAGE_NAME.fullmatch(self.name) is None:
            raise ValueError(NAME_CANT_BE_INVALID_MESSAGE)
        if self.commit is None or not self.commit.arch:
            raise ValueError(ARCHITECTURE_CANT_BE_EMPTY_MESSAGE)
        if not self.output_types:
            raise ValueError(NO_OUTPUT_TYPES)
        if any(out not in _ACCEPTED_IMAGE_TYPES for out in self.output_types):
            raise ValueError(IMAGE_TYPE_NOT_ACCEPTED)
        if self.version == 1 and name_in_use is not None and name_in_use(self.name):
            raise ValueError(IMAGE_NAME_ALREADY_EXISTS)

        if self.has_output_type(IMAGE_TYPE_INSTALLER):
            if self.installer is None:
                raise ValueError(MISSING_INSTALLER)
            if not self.installer.username:
                raise ValueError(MISSING_USERNAME_ERROR)
            if not self.installer.ssh_key:
                raise ValueError(MISSING_SSH_KEY_ERROR)
            if _VALID_SSH_PREFIX.match(self.installer.ssh_key) is None:
                raise ValueError(INVALID_SSH_KEY_ERROR)

    def has_output_type(self, image_type: str) -> bool:
        """Tell whether the image asks for the given output type."""
        return image_type in self.output_types

    def get_packages_list(self) -> list[str]:
        """Return the required packages followed by the image's own packages."""
        return [*REQUIRED_PACKAGES, *(pkg.name for pkg in self.packages)]

    def get_all_packages_list(self) -> list[str]:
        """Return all package names, custom packages included."""
        return [*self.get_packages_list(), *(pkg.name for pkg in self.custom_packages)]


@dataclass
class ImageSet(Model):
    """A collection of versions of one image."""

    name: str = _json_field("Name", "")
    version: int = _json_field("Version", 1)
    account: str = _json_field("Account", "")
    images: list[Image] = _json_field("Images", factory=list, model=Image)


@dataclass
class PackageDiff:
    """Package differences between the current and an available commit."""

    added: list[InstalledPackage] = field(default_factory=list)
    removed: list[InstalledPackage] = field(default_factory=list)
    upgraded: list[InstalledPackage] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Return the JSON-ready mapping."""
        return {
            "Added": [pkg.to_dict() for pkg in self.added],
            "Removed": [pkg.to_dict() for pkg in self.removed],
            "Upgraded": [pkg.to_dict() for pkg in self.upgraded],
        }


@dataclass
class ImageUpdateAvailable:
    """An image that can be updated to, with its package differences."""

    image: Image = field(default_factory=Image)
    package_diff: PackageDiff = field(default_factory=PackageDiff)

    def to_dict(self) -> dict:
        """Return the JSON-ready mapping."""
        return {"Image": self.image.to_dict(), "PackageDiff": self.package_diff.to_dict()}


@dataclass
class ImageInfo:
    """An image with its available updates and rollback image."""

    image: Image = field(default_factory=Image)
    updates_available: list[ImageUpdateAvailable] | None = None
    rollback: Image | None = None

    def to_dict(self) -> dict:
        """Return the JSON-ready mapping."""
        result: dict = {"Image": self.image.to_dict()}
        if self.updates_available is not None:
            result["UpdatesAvailable"] = [u.to_dict() for u in self.updates_available]
        if self.rollback is not None:
            result["RollbackImage"] = self.rollback.to_dict()
        return result
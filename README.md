# edgeapi

Building blocks for fleet edge management: data models for images,
commits, devices, device groups, update transactions and FDO onboarding
records; request helpers for accounts, identity, pagination and query
filters; and HTTP clients for the FDO onboarding server and the
playbook dispatcher.

## Installation

```
pip install edgeapi
```

To run the test suite:

```
pip install "edgeapi[test]"
pytest
```

## Layout

- `edgeapi.models.base` defines `Model`, the dataclass every record
  derives from (`id`, `created_at`, `updated_at`, `deleted_at`), with
  `to_dict()` / `from_dict()` for the JSON form. Timestamps are written
  with `format_rfc3339nano` and read with `parse_rfc3339nano`.
- `edgeapi.models.commits`: `Commit`, `Repo`, `Package`,
  `InstalledPackage` and the `RepoStatus` enum.
- `edgeapi.models.images`: `Image`, `ImageSet`, `Installer`,
  `PackageDiff`, `ImageUpdateAvailable`, `ImageInfo` and the
  `ImageStatus` enum. `Image.get_packages_list()` returns the required
  base packages followed by the image's own; `get_all_packages_list()`
  adds the custom packages.
- `edgeapi.models.thirdpartyrepo`: `ThirdPartyRepo`.
- `edgeapi.models.devices`: `Device`, `DeviceGroup`, `EdgeDevice`,
  `DeviceDetails`, `DeviceDetailsList`, `DeviceView`, `DeviceViewList`,
  `DeviceDeviceGroup`, `DeviceImageInfo`, `DeviceGroupListDetail`,
  `DeviceGroupDetails` and the `DeviceViewStatus` enum.
- `edgeapi.models.updates`: `UpdateTransaction`, `DispatchRecord` and the
  `UpdateStatus` and `DispatchRecordStatus` enums.
- `edgeapi.models.ownershipvoucher`: `FDODevice`,
  `OwnershipVoucherData`, `FDOUser` and `SSHKey`.

`Image`, `ThirdPartyRepo`, `DeviceGroup` and `UpdateTransaction` offer
`validate_request()`, which raises `ValueError` with a message that
explains what is wrong. `Image.validate_request` takes an optional
`name_in_use` callable; it is asked about the name only for version 1
of an image.

- `edgeapi.common.account.get_account_from_context(ctx, auth)` returns
  the default account `"0000000"` when `auth` is false, otherwise the
  `account_number` of the decoded identity held in the context, raising
  `LookupError` if there is none.
- `edgeapi.common.identity`: `set_original_identity(ctx, value)` returns
  a new context holding the raw identity header, and
  `get_original_identity(ctx)` reads it back (or raises `LookupError`).
- `edgeapi.common.pagination`: `paginate(query, ctx)` reads `limit` and
  `offset` from parsed query parameters into a new context (defaults 100
  and 0; a non-integer raises `BadRequest`), and `get_pagination(ctx)`
  returns the stored `Pagination` or the defaults.
- `edgeapi.common.filters`: `Filter`, an immutable `Query` builder
  (`where`, `or_`, `order`, `to_sql`), and the filter factories
  `contain_filter_handler`, `one_of_filter_handler`,
  `created_at_filter_handler`, `sort_filter_handler` and
  `compose_filters`.
- `edgeapi.clients.headers.get_outgoing_headers(ctx, auth)` returns the
  request id header and, with `auth`, the original identity header.
- `edgeapi.clients.fdo.Client` uploads (`batch_upload`) and deletes
  (`batch_delete`) ownership vouchers; refusals raise `FDOClientError`.
- `edgeapi.clients.playbookdispatcher.Client.execute_dispatcher` sends a
  `DispatcherPayload` and returns a list of `Response`; any answer other
  than 207 raises `requests.HTTPError`.
- `edgeapi.apierrors` defines `APIError` and its subclasses
  `BadRequest`, `NotFound` and `InternalServerError`, each rendered with
  `to_dict()`.
- `edgeapi.logger` provides `init_logger(log_level)`, `flush_logger()`
  and `log_error_and_panic(msg, err)`.

## Examples

Validating an image request:

```python
from edgeapi.models.commits import Commit
from edgeapi.models.images import Image, Installer

image = Image(
    name="sensor-image",
    distribution="rhel-8",
    commit=Commit(arch="x86_64"),
    output_types=["rhel-edge-installer"],
    installer=Installer(username="root", ssh_key="ssh-rsa placeholder"),
)
image.validate_request(name_in_use=lambda name: False)
print(image.get_all_packages_list())
```

Building a filtered query from request parameters:

```python
from edgeapi.common.filters import (
    Filter, Query, compose_filters, contain_filter_handler, sort_filter_handler,
)

apply = compose_filters(
    sort_filter_handler("images", "id", "ASC"),
    contain_filter_handler(Filter("name", "images.name")),
)
sql, params = apply({"name": ["Motion"]}, Query()).to_sql("images")
# SELECT * FROM images WHERE (images.name LIKE ?) ORDER BY images.id ASC
# ['%Motion%']
```

Talking to the onboarding server:

```python
from edgeapi.clients.fdo import Client

client = Client("http://localhost:8080", "v1", authorization_bearer="token")
client.batch_delete(["a9bcd683-a7e4-46ed-80b2-6e55e8610d04"])
```

## What this package does not do

It is a library only. There is no HTTP server or router, no command-line
tool, and no database layer: records are plain dataclasses, and the
filters produce SQL text and parameters for you to run yourself. Only
two service clients are included, for FDO onboarding and for the
playbook dispatcher.
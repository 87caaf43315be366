from __future__ import annotations

import copy

import pytest

from ofdb_cli.domain.errors import PatchRequestError
from ofdb_cli.domain.model import Place  # noqa: TC001
from ofdb_cli.domain.patch import (
    FieldPatchError,
    PlacePatch,
    VersionConflictError,
    apply_place_patch,
    check_version,
)


def test_apply_place_patch_changes_fields_and_version(place: Place) -> None:
    patch = PlacePatch(
        id=place.id,
        version=place.version + 1,
        directives={"title": "++2", "tags": "--bar, ++baz", "city": "--", "lat": "==1.5"},
    )

    result = apply_place_patch(place, patch)

    assert result is place
    assert place.title == "Unverpackt Laden 2"
    assert place.tags == ["foo", "baz"]
    assert place.city is None
    assert place.lat == 1.5
    assert place.version == 4


def test_version_must_be_successor(place: Place) -> None:
    check_version(place, place.version + 1)
    with pytest.raises(VersionConflictError) as excinfo:
        check_version(place, place.version)

    assert excinfo.value.current == place.version
    assert excinfo.value.supplied == place.version


@pytest.mark.parametrize("offset", [0, 2, -1])
def test_version_conflict_leaves_place_unchanged(place: Place, offset: int) -> None:
    before = copy.deepcopy(place)
    patch = PlacePatch(id=place.id, version=place.version + offset, directives={"title": "==X"})

    with pytest.raises(PatchRequestError) as excinfo:
        apply_place_patch(place, patch)

    assert place == before
    assert isinstance(excinfo.value.causes[0], VersionConflictError)
    assert str(excinfo.value).startswith("Invalid patch request: Version conflict")


def test_any_field_error_leaves_place_unchanged(place: Place) -> None:
    before = copy.deepcopy(place)
    patch = PlacePatch(
        id=place.id,
        version=place.version + 1,
        directives={"city": "==Berlin", "title": "--", "lat": "==north"},
    )

    with pytest.raises(PatchRequestError) as excinfo:
        apply_place_patch(place, patch)

    assert place == before
    causes = excinfo.value.causes
    assert [type(cause) for cause in causes] == [FieldPatchError, FieldPatchError]
    assert {cause.field_name for cause in causes if isinstance(cause, FieldPatchError)} == {
        "title",
        "lat",
    }


def test_read_only_and_unknown_fields_are_ignored(
    place: Place, caplog: pytest.LogCaptureFixture
) -> None:
    patch = PlacePatch(
        id=place.id,
        version=place.version + 1,
        directives={"license": "==MIT", "created": "==1", "unknown": "==x"},
    )

    with caplog.at_level("WARNING"):
        apply_place_patch(place, patch)

    assert place.license == "CC0-1.0"
    assert place.created == 1_600_000_000
    assert place.version == 4
    assert "read-only field 'license'" in caplog.text
    assert "unknown field 'unknown'" in caplog.text


def test_empty_patch_only_bumps_version(place: Place) -> None:
    before = copy.deepcopy(place)

    apply_place_patch(place, PlacePatch(id=place.id, version=place.version + 1))

    before.version += 1
    assert place == before

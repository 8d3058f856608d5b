"""Tests for address lookup models."""

import pytest
from pydantic import TypeAdapter, ValidationError

from app.models.address import (
    ErrorKind,
    GeoPoint,
    LookupData,
    LookupFailure,
    LookupResult,
    LookupSuccess,
)


class TestGeoPoint:
    """Coordinate bounds."""

    @pytest.mark.parametrize(
        "latitude, longitude",
        [(90, 180), (-90, -180), (0, 0), (-33.4296842928957, 149.56705027262)],
    )
    def test_accepts_valid_coordinates(self, latitude, longitude):
        point = GeoPoint(latitude=latitude, longitude=longitude)
        assert (point.latitude, point.longitude) == (latitude, longitude)

    @pytest.mark.parametrize(
        "latitude, longitude", [(90.1, 0), (-91, 0), (0, 180.5), (0, -181)]
    )
    def test_rejects_out_of_range(self, latitude, longitude):
        with pytest.raises(ValidationError):
            GeoPoint(latitude=latitude, longitude=longitude)

    def test_is_immutable(self):
        point = GeoPoint(latitude=1, longitude=2)
        with pytest.raises(ValidationError):
            point.latitude = 5  # type: ignore[misc]


class TestEnvelope:
    """Serialised result shapes."""

    def test_success_uses_camel_case(self):
        result = LookupSuccess(
            data=LookupData(
                address="1 MACQUARIE STREET SYDNEY",
                location=GeoPoint(latitude=-33.86, longitude=151.21),
                suburb="SYDNEY",
                state_electoral_district="SYDNEY",
            )
        )

        assert result.to_dict() == {
            "success": True,
            "data": {
                "address": "1 MACQUARIE STREET SYDNEY",
                "location": {"latitude": -33.86, "longitude": 151.21},
                "suburb": "SYDNEY",
                "stateElectoralDistrict": "SYDNEY",
            },
        }

    def test_failure_shape(self):
        result = LookupFailure.create("Address not found", ErrorKind.ADDRESS_NOT_FOUND)

        assert result.to_dict() == {
            "success": False,
            "error": {"message": "Address not found", "code": "ADDRESS_NOT_FOUND"},
        }

    def test_result_union_parses_both_variants(self):
        adapter = TypeAdapter(LookupResult)

        failure = adapter.validate_python(
            {"success": False, "error": {"message": "x", "code": "NETWORK_ERROR"}}
        )
        success = adapter.validate_python(
            {
                "success": True,
                "data": {
                    "address": "A ST",
                    "location": {"latitude": 1, "longitude": 2},
                    "suburb": "B",
                    "stateElectoralDistrict": "B",
                },
            }
        )

        assert isinstance(failure, LookupFailure)
        assert failure.error.code is ErrorKind.NETWORK_ERROR
        assert isinstance(success, LookupSuccess)

    def test_error_kinds_are_exhaustive(self):
        assert {kind.value for kind in ErrorKind} == {
            "MISSING_ADDRESS",
            "INVALID_ADDRESS_FORMAT",
            "ADDRESS_NOT_FOUND",
            "GEOCODING_API_ERROR",
            "BOUNDARIES_API_ERROR",
            "NETWORK_ERROR",
            "INTERNAL_ERROR",
        }

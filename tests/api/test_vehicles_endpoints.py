"""API tests for vehicles endpoints.

Tests the complete HTTP request/response cycle for the vehicles resource:
- Success envelope: {"message": "Success", "data": ..., "count": n}
- Error envelope: {"message": ...} with status by error kind
- Path/query/body parsing failures answered with 400

Architecture:
- Uses FastAPI TestClient with real app + dependency overrides
- The service is real, backed by a fresh seeded store per test
"""

from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from src.application.services import VehicleService
from src.core.container import get_vehicle_service
from src.infrastructure.persistence.repositories import VehicleMapRepository
from src.main import app
from tests.conftest import seed_vehicles


NEW_VEHICLE = {
    "brand": "Renault",
    "model": "Clio",
    "registration": "NEW-001",
    "color": "yellow",
    "year": 2023,
    "passengers": 5,
    "max_speed": 185.0,
    "fuel_type": "gasoline",
    "transmission": "manual",
    "weight": 1150.0,
    "height": 1.44,
    "length": 4.05,
    "width": 1.73,
}


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def repository():
    return VehicleMapRepository(seed_vehicles())


@pytest.fixture
def client(repository):
    """Provide test client with the service bound to a seeded store."""
    app.dependency_overrides[get_vehicle_service] = lambda: VehicleService(repository)
    yield TestClient(app)
    app.dependency_overrides.pop(get_vehicle_service, None)


@pytest.fixture
def empty_client():
    app.dependency_overrides[get_vehicle_service] = lambda: VehicleService(
        VehicleMapRepository()
    )
    yield TestClient(app)
    app.dependency_overrides.pop(get_vehicle_service, None)


def assert_not_found(response):
    assert response.status_code == 404
    assert response.json() == {"message": "Vehicle(s) not found"}


# =============================================================================
# List / Get
# =============================================================================


@pytest.mark.api
class TestListVehicles:
    """Tests for GET /vehicles."""

    def test_returns_all_with_count(self, client):
        response = client.get("/vehicles")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Success"
        assert body["count"] == 5
        assert sorted(body["data"]) == ["1", "2", "3", "4", "5"]

    def test_vehicle_uses_public_keys(self, client):
        vehicle = client.get("/vehicles").json()["data"]["2"]

        assert vehicle == {
            "id": 2,
            "brand": "Toyota",
            "model": "Hilux",
            "registration": "REG-002",
            "color": "white",
            "year": 2022,
            "passengers": 5,
            "max_speed": 200.0,
            "fuel_type": "diesel",
            "transmission": "automatic",
            "weight": 2100.0,
            "height": 1.45,
            "length": 5.3,
            "width": 1.9,
        }

    def test_empty_store_returns_empty_data(self, empty_client):
        response = empty_client.get("/vehicles")

        assert response.status_code == 200
        assert response.json() == {"message": "Success", "count": 0, "data": {}}

    def test_response_has_trace_id_header(self, client):
        response = client.get("/vehicles", headers={"X-Trace-Id": "trace-1"})

        assert response.headers["X-Trace-Id"] == "trace-1"


@pytest.mark.api
class TestGetVehicle:
    """Tests for GET /vehicles/{id}."""

    def test_returns_vehicle(self, client):
        response = client.get("/vehicles/4")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Success"
        assert body["data"]["brand"] == "Ford"
        assert "count" not in body

    def test_unknown_id_is_404(self, client):
        assert_not_found(client.get("/vehicles/99"))

    def test_non_numeric_id_is_400(self, client):
        response = client.get("/vehicles/abc")

        assert response.status_code == 400
        assert response.json()["message"].startswith("Invalid vehicle_id")


# =============================================================================
# Create
# =============================================================================


@pytest.mark.api
class TestCreateVehicle:
    """Tests for POST /vehicles."""

    def test_creates_with_next_id(self, client):
        response = client.post("/vehicles", json=NEW_VEHICLE)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Success"
        assert body["data"]["id"] == 6
        assert body["data"]["registration"] == "NEW-001"
        assert client.get("/vehicles/6").status_code == 200

    def test_first_vehicle_on_empty_store_gets_id_1(self, empty_client):
        response = empty_client.post("/vehicles", json=NEW_VEHICLE)

        assert response.json()["data"]["id"] == 1

    def test_keeps_explicit_id(self, client):
        response = client.post("/vehicles", json={**NEW_VEHICLE, "id": 40})

        assert response.status_code == 201
        assert response.json()["data"]["id"] == 40

    def test_only_required_fields(self, client):
        body = {key: NEW_VEHICLE[key] for key in ("brand", "model", "registration", "color", "year")}

        response = client.post("/vehicles", json=body)

        assert response.status_code == 201
        assert response.json()["data"]["max_speed"] == 0.0

    @pytest.mark.parametrize("field", ["brand", "model", "registration", "color", "year"])
    def test_missing_required_field_is_named(self, client, field):
        body = {key: value for key, value in NEW_VEHICLE.items() if key != field}

        response = client.post("/vehicles", json=body)

        assert response.status_code == 400
        assert response.json() == {"message": f"{field} is required"}

    def test_first_missing_field_is_reported(self, client):
        response = client.post("/vehicles", json={"color": "red"})

        assert response.json() == {"message": "brand is required"}

    @pytest.mark.parametrize(
        "content",
        ["not json", "", "[1, 2]", '{"brand": "X", "model": "Y", "registration": "Z", "color": "c", "year": "soon"}'],
    )
    def test_unparsable_body_is_400(self, client, content):
        response = client.post(
            "/vehicles",
            content=content,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid body request"}

    @pytest.mark.parametrize(
        ("field", "value"),
        [("year", "2020"), ("passengers", "5"), ("max_speed", "185.0"), ("brand", 7)],
    )
    def test_values_are_not_coerced(self, client, field, value):
        response = client.post("/vehicles", json={**NEW_VEHICLE, field: value})

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid body request"}

    def test_duplicate_registration_is_409(self, client):
        response = client.post("/vehicles", json={**NEW_VEHICLE, "registration": "REG-001"})

        assert response.status_code == 409
        assert response.json() == {"message": "Vehicle already exists"}

    def test_duplicate_id_is_409(self, client):
        response = client.post("/vehicles", json={**NEW_VEHICLE, "id": 3})

        assert response.status_code == 409
        assert response.json() == {"message": "Vehicle already exists"}


# =============================================================================
# Filters and aggregates
# =============================================================================


@pytest.mark.api
class TestFilterEndpoints:
    """Tests for the filtering GET endpoints."""

    def test_brand_between_years(self, client):
        response = client.get("/vehicles/brand/Toyota/between/2021/2023")

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 1
        assert list(body["data"]) == ["2"]

    def test_brand_between_years_not_found(self, client):
        assert_not_found(client.get("/vehicles/brand/Tesla/between/2000/2030"))

    def test_brand_between_years_non_numeric_is_400(self, client):
        response = client.get("/vehicles/brand/Toyota/between/twenty/2023")

        assert response.status_code == 400
        assert response.json()["message"].startswith("Invalid start_year")

    def test_color_and_year(self, client):
        response = client.get("/vehicles/color/red/year/2020")

        assert response.status_code == 200
        assert list(response.json()["data"]) == ["1"]

    def test_color_and_year_non_numeric_is_400(self, client):
        response = client.get("/vehicles/color/red/year/abc")

        assert response.status_code == 400

    def test_fuel_type(self, client):
        response = client.get("/vehicles/fuel-type/gas")

        assert response.json()["count"] == 1
        assert list(response.json()["data"]) == ["5"]

    def test_fuel_type_not_found(self, client):
        assert_not_found(client.get("/vehicles/fuel-type/electric"))

    def test_transmission(self, client):
        response = client.get("/vehicles/transmission/automatic")

        assert response.status_code == 200
        assert list(response.json()["data"]) == ["2"]

    def test_dimensions(self, client):
        response = client.get("/vehicles/dimensions", params={"length": "4.4-4.6", "width": "1.8-1.8"})

        assert response.status_code == 200
        assert sorted(response.json()["data"]) == ["1", "4"]

    def test_dimensions_not_found(self, client):
        assert_not_found(
            client.get("/vehicles/dimensions", params={"length": "9-10", "width": "1-2"})
        )

    @pytest.mark.parametrize(
        "params",
        [
            {"length": "4.4", "width": "1.8-1.8"},
            {"length": "4.4-4.6", "width": "a-b"},
            {"length": "1-2-3", "width": "1.8-1.8"},
        ],
    )
    def test_dimensions_malformed_range_is_400(self, client, params):
        response = client.get("/vehicles/dimensions", params=params)

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid dimensions"}

    def test_dimensions_missing_param_is_400(self, client):
        response = client.get("/vehicles/dimensions", params={"length": "4-5"})

        assert response.status_code == 400
        assert response.json()["message"].startswith("Invalid width")

    def test_weight(self, client):
        response = client.get("/vehicles/weight", params={"min": 900, "max": 1100})

        assert response.status_code == 200
        assert sorted(response.json()["data"]) == ["3", "5"]

    def test_weight_non_numeric_is_400(self, client):
        response = client.get("/vehicles/weight", params={"min": "light", "max": 1100})

        assert response.status_code == 400
        assert response.json()["message"].startswith("Invalid min")

    def test_weight_missing_param_is_400(self, client):
        response = client.get("/vehicles/weight", params={"min": 900})

        assert response.status_code == 400


@pytest.mark.api
class TestAverageEndpoints:
    def test_average_speed(self, client):
        response = client.get("/vehicles/average-speed/brand/Toyota")

        assert response.status_code == 200
        assert response.json() == {
            "message": "Success",
            "data": {"brand": "Toyota", "average_speed": 190.0},
        }

    def test_average_speed_unknown_brand(self, client):
        assert_not_found(client.get("/vehicles/average-speed/brand/Tesla"))

    def test_average_capacity(self, client):
        response = client.get("/vehicles/average-capacity/brand/Fiat")

        assert response.status_code == 200
        assert response.json()["data"] == {"brand": "Fiat", "average_capacity": 4.0}

    def test_average_capacity_unknown_brand(self, client):
        assert_not_found(client.get("/vehicles/average-capacity/brand/Tesla"))


# =============================================================================
# Updates and delete
# =============================================================================


@pytest.mark.api
class TestUpdateMaxSpeed:
    """Tests for PATCH /vehicles/{id}/update-speed."""

    def test_updates_speed(self, client):
        response = client.patch("/vehicles/1/update-speed", json={"max_speed": 500})

        assert response.status_code == 200
        assert response.json() == {
            "message": "Success",
            "data": {"id": 1, "max_speed": 500.0},
        }
        assert client.get("/vehicles/1").json()["data"]["max_speed"] == 500.0

    def test_out_of_range_is_400(self, client):
        response = client.patch("/vehicles/1/update-speed", json={"max_speed": 501})

        assert response.status_code == 400
        assert response.json() == {"message": "Max speed must be between 0 and 500"}
        assert client.get("/vehicles/1").json()["data"]["max_speed"] == 180.0

    def test_out_of_range_on_unknown_id_is_400(self, client):
        response = client.patch("/vehicles/99/update-speed", json={"max_speed": -1})

        assert response.status_code == 400

    def test_unknown_id_is_404(self, client):
        assert_not_found(client.patch("/vehicles/99/update-speed", json={"max_speed": 100}))

    def test_missing_body_field_is_400(self, client):
        response = client.patch("/vehicles/1/update-speed", json={})

        assert response.status_code == 400
        assert response.json() == {"message": "max_speed is required"}

    def test_malformed_body_is_400(self, client):
        response = client.patch("/vehicles/1/update-speed", json={"max_speed": "fast"})

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid body request"}

    def test_numeric_string_speed_is_400(self, client):
        response = client.patch("/vehicles/1/update-speed", json={"max_speed": "200"})

        assert response.status_code == 400
        assert client.get("/vehicles/1").json()["data"]["max_speed"] == 180.0


@pytest.mark.api
class TestUpdateFuelType:
    """Tests for PATCH /vehicles/{id}/update-fuel."""

    def test_updates_fuel_case_insensitively(self, client):
        response = client.patch("/vehicles/1/update-fuel", json={"fuel_type": "Diesel"})

        assert response.status_code == 200
        assert response.json() == {
            "message": "Success",
            "data": {"id": 1, "fuel_type": "diesel"},
        }
        assert client.get("/vehicles/1").json()["data"]["fuel_type"] == "diesel"

    def test_unknown_fuel_is_400(self, client):
        response = client.patch("/vehicles/1/update-fuel", json={"fuel_type": "electric"})

        assert response.status_code == 400
        assert response.json() == {
            "message": "Fuel type must be one of: gasoline, diesel, biodiesel, gas"
        }

    @pytest.mark.parametrize("fuel", [" diesel", "  DIESEL \n"])
    def test_padded_fuel_is_400(self, client, fuel):
        response = client.patch("/vehicles/1/update-fuel", json={"fuel_type": fuel})

        assert response.status_code == 400
        assert client.get("/vehicles/1").json()["data"]["fuel_type"] == "gasoline"

    def test_unknown_id_is_404_even_with_unknown_fuel(self, client):
        assert_not_found(client.patch("/vehicles/99/update-fuel", json={"fuel_type": "electric"}))


@pytest.mark.api
class TestDeleteVehicle:
    """Tests for DELETE /vehicles/{id}."""

    def test_deletes_vehicle(self, client):
        response = client.delete("/vehicles/3")

        assert response.status_code == 204
        assert response.content == b""
        assert_not_found(client.get("/vehicles/3"))

    def test_unknown_id_is_404(self, client):
        assert_not_found(client.delete("/vehicles/99"))


# =============================================================================
# Routing errors
# =============================================================================


@pytest.mark.api
class TestRoutingErrors:
    def test_unknown_route_is_404_envelope(self, client):
        response = client.get("/nope")

        assert response.status_code == 404
        assert response.json() == {"message": "Not Found"}

    def test_wrong_method_is_405_envelope(self, client):
        response = client.put("/vehicles/1")

        assert response.status_code == 405
        assert response.json() == {"message": "Method Not Allowed"}
        assert "allow" in response.headers

    def test_unhandled_exception_is_500_envelope(self, client, repository, monkeypatch):
        def explode():
            raise RuntimeError("boom")

        monkeypatch.setattr(repository, "find_all", explode)
        failing_client = TestClient(app, raise_server_exceptions=False)

        response = failing_client.get("/vehicles")

        assert response.status_code == 500
        assert response.json() == {"message": "Internal server error"}

    def test_unhandled_exception_is_logged_with_client_trace_id(
        self, client, repository, monkeypatch
    ):
        def explode():
            raise RuntimeError("boom")

        monkeypatch.setattr(repository, "find_all", explode)
        failing_client = TestClient(app, raise_server_exceptions=False)
        logger = MagicMock()

        with patch(
            "src.presentation.routers.api.errors.exception_handlers.get_logger",
            return_value=logger,
        ):
            response = failing_client.get("/vehicles", headers={"X-Trace-Id": "abc-123"})

        assert response.status_code == 500
        assert response.headers["X-Trace-Id"] == "abc-123"
        call = logger.error.call_args
        assert call.args == ("unhandled_exception",)
        assert call.kwargs["trace_id"] == "abc-123"
        assert isinstance(call.kwargs["error"], RuntimeError)

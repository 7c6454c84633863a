"""Tests for the road and pathfinding services."""

from unittest.mock import MagicMock

import pytest

from delivery_routing.adapters.graph import DijkstraRouteSolver, InMemoryRoadRepository
from delivery_routing.domain.errors import (
    InvalidRoadError,
    NodeNotFoundError,
    NoRouteFoundError,
)
from delivery_routing.domain.models import City, Road, RoadRequest, RouteResult
from delivery_routing.services import PathfindingService, RoadService


@pytest.fixture
def repository():
    repo = InMemoryRoadRepository()
    for name in ("TBILISI", "BATUMI", "KUTAISI", "GONIO"):
        repo.get_or_create_city(name)
    return repo


@pytest.fixture
def pathfinding(repository):
    return PathfindingService(
        road_repository=repository,
        route_solver=DijkstraRouteSolver(),
    )


class TestPathfindingService:
    """Test suite for PathfindingService."""

    def test_simple_path(self, repository, pathfinding):
        repository.upsert_road("TBILISI", "BATUMI", 360)

        result = pathfinding.find_fastest_path("Tbilisi", "Batumi")

        assert result.path == ("TBILISI", "BATUMI")
        assert result.total_travel_time_minutes == 360
        assert len(result.roads) == 1

    def test_multiple_cities(self, repository, pathfinding):
        repository.upsert_road("TBILISI", "BATUMI", 360)
        repository.upsert_road("BATUMI", "GONIO", 45)
        repository.upsert_road("TBILISI", "KUTAISI", 240)
        repository.upsert_road("KUTAISI", "GONIO", 300)

        result = pathfinding.find_fastest_path("Tbilisi", "Gonio")

        assert result.path == ("TBILISI", "BATUMI", "GONIO")
        assert result.total_travel_time_minutes == 405

    def test_names_are_case_and_space_insensitive(self, repository, pathfinding):
        repository.upsert_road("TBILISI", "BATUMI", 360)

        result = pathfinding.find_fastest_path("  tbilisi ", "batumi")

        assert result.total_travel_time_minutes == 360

    def test_source_city_not_found(self, pathfinding):
        with pytest.raises(NodeNotFoundError) as exc_info:
            pathfinding.find_fastest_path("NonExistent", "Batumi")

        assert exc_info.value.city_name == "NonExistent"
        assert "Source" in str(exc_info.value)

    def test_destination_city_not_found(self, pathfinding):
        with pytest.raises(NodeNotFoundError) as exc_info:
            pathfinding.find_fastest_path("Tbilisi", "NonExistent")

        assert "Destination" in str(exc_info.value)

    def test_blank_city_name_is_not_found(self, pathfinding):
        with pytest.raises(NodeNotFoundError):
            pathfinding.find_fastest_path("   ", "Batumi")

    def test_no_route_exists(self, repository, pathfinding):
        repository.upsert_road("KUTAISI", "GONIO", 100)

        with pytest.raises(NoRouteFoundError) as exc_info:
            pathfinding.find_fastest_path("Tbilisi", "Batumi")

        assert exc_info.value.departure == "TBILISI"
        assert exc_info.value.arrival == "BATUMI"

    def test_with_cycles(self, repository, pathfinding):
        repository.upsert_road("TBILISI", "KUTAISI", 100)
        repository.upsert_road("KUTAISI", "BATUMI", 100)
        repository.upsert_road("BATUMI", "TBILISI", 100)
        repository.upsert_road("TBILISI", "GONIO", 500)

        result = pathfinding.find_fastest_path("Tbilisi", "Gonio")

        assert result.num_stops == 2
        assert result.total_travel_time_minutes == 500

    def test_same_source_and_destination(self, pathfinding):
        result = pathfinding.find_fastest_path("Tbilisi", "Tbilisi")

        assert result.path == ("TBILISI",)
        assert result.roads == ()
        assert result.total_travel_time_minutes == 0

    def test_solver_receives_single_snapshot(self):
        repo = MagicMock()
        repo.get_city.side_effect = lambda name: City(name=name)
        snapshot = (Road("A", "B", 3),)
        repo.list_roads.return_value = snapshot
        solver = MagicMock()
        solver.solve.return_value = RouteResult(
            path=("A", "B"), roads=snapshot, total_travel_time_minutes=3
        )

        service = PathfindingService(road_repository=repo, route_solver=solver)
        result = service.find_fastest_path("a", "b")

        repo.list_roads.assert_called_once_with()
        solver.solve.assert_called_once_with(snapshot, "A", "B")
        assert result.total_travel_time_minutes == 3


class TestRoadService:
    """Test suite for RoadService."""

    @pytest.fixture
    def service(self):
        return RoadService(road_repository=InMemoryRoadRepository())

    def test_creates_roads_and_cities(self, service):
        roads = service.create_or_update_roads(
            [RoadRequest(" tbilisi", "Batumi ", 360)]
        )

        assert roads == [Road("TBILISI", "BATUMI", 360)]
        repo = service.road_repository
        assert repo.get_city("TBILISI") == City("TBILISI")
        assert repo.get_city("BATUMI") == City("BATUMI")

    def test_updates_existing_road(self, service):
        service.create_or_update_roads([RoadRequest("Tbilisi", "Batumi", 360)])
        service.create_or_update_roads([RoadRequest("TBILISI", "batumi", 300)])

        assert service.road_repository.list_roads() == (Road("TBILISI", "BATUMI", 300),)

    def test_opposite_directions_are_distinct_roads(self, service):
        service.create_or_update_roads(
            [RoadRequest("A", "B", 1), RoadRequest("B", "A", 2)]
        )

        assert len(service.road_repository.list_roads()) == 2

    @pytest.mark.parametrize(
        "request_, field_name",
        [
            (RoadRequest(None, "B", 1), "from_city"),
            (RoadRequest("  ", "B", 1), "from_city"),
            (RoadRequest("A", "", 1), "to_city"),
            (RoadRequest("A", "B", None), "travel_time_minutes"),
            (RoadRequest("A", "B", -5), "travel_time_minutes"),
            (RoadRequest("a", " A ", 5), "to_city"),
        ],
    )
    def test_rejects_invalid_requests(self, service, request_, field_name):
        with pytest.raises(InvalidRoadError) as exc_info:
            service.create_or_update_roads([request_])

        assert exc_info.value.field_name == field_name
        assert service.road_repository.list_roads() == ()

    def test_rejected_batch_stores_nothing(self, service):
        service.create_or_update_roads([RoadRequest("X", "Y", 9)])
        before = service.road_repository.list_roads()

        with pytest.raises(InvalidRoadError):
            service.create_or_update_roads(
                [RoadRequest("A", "B", 5), RoadRequest("C", "C", 1)]
            )

        assert service.road_repository.list_roads() == before
        assert service.road_repository.get_city("A") is None

    def test_zero_travel_time_is_allowed(self, service):
        roads = service.create_or_update_roads([RoadRequest("A", "B", 0)])

        assert roads[0].travel_time_minutes == 0

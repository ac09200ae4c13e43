from __future__ import annotations

from uuid import uuid4

import pytest

from route_planner.adapters.aws import s3_client
from route_planner.adapters.persistence import (
    CsvAttractionMapper,
    CsvRoadNetworkRepository,
)
from route_planner.app.services.route_planning_service import RoutePlanningService


@pytest.fixture()
def bucket(require_localstack: str) -> str:
    s3 = s3_client()
    name = f"route-planner-test-{uuid4().hex[:12]}"
    s3.create_bucket(
        Bucket=name,
        CreateBucketConfiguration={"LocationConstraint": "eu-west-1"},
    )
    return name


@pytest.mark.integration
def test_network_and_attractions_load_from_s3(bucket: str) -> None:
    s3 = s3_client()
    s3.put_object(
        Bucket=bucket,
        Key="data/roads.csv",
        Body=b"A,B,5\nB,C,5\nC,D,5\nA,D,20\n",
    )
    s3.put_object(
        Bucket=bucket,
        Key="data/attractions.csv",
        Body=b"Bell,B\nCanyon,C\n",
    )

    roads_uri = f"s3://{bucket}/data/roads.csv"
    network = CsvRoadNetworkRepository(path=roads_uri).load_network()
    mapper = CsvAttractionMapper(path=f"s3://{bucket}/data/attractions.csv")

    assert network.cities() == {"A", "B", "C", "D"}
    assert mapper.resolve("Canyon") == "C"

    service = RoutePlanningService(network=network, attraction_mapper=mapper)
    route = service.plan_optimal(
        start="A", end="D", attraction_names=["Canyon", "Bell"]
    )
    assert route.cities == ("A", "B", "C", "D")
    assert route.total_distance == 15.0

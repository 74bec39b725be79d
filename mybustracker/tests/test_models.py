"""Tests for response records and request parameters."""

from datetime import time

import pytest
from pydantic import ValidationError

from mybustracker.models import (
    BusStops,
    Destinations,
    Direction,
    DiversionPoints,
    Diversions,
    JourneyTimes,
    Operator,
    ServicePoints,
    StopType,
    Timetable,
    TopoId,
)


def test_operator_accepts_all_alias():
    assert Operator("ALL") is Operator.ALL_OPERATORS
    assert Operator("0") is Operator.ALL_OPERATORS
    assert Operator("LB") is Operator.LOTHIAN_BUSES


def test_operator_rejects_unknown_value():
    with pytest.raises(ValueError):
        Operator("XX")


def test_records_are_frozen():
    topo = TopoId(topo_id="20261019", operator_id=Operator.LOTHIAN_BUSES)

    with pytest.raises(ValidationError):
        topo.topo_id = "other"


def test_records_accept_field_names():
    """Records can be built from Python field names as well as wire aliases."""
    topo = TopoId(topo_id="1", operator_id="LB")

    assert topo.operator_id is Operator.LOTHIAN_BUSES


def test_bus_stops_map_coordinates():
    record = BusStops.model_validate(
        {
            "busStops": [
                {
                    "operatorId": "LB",
                    "stopId": "36232087",
                    "name": "Princes Street",
                    "x": 55.9521,
                    "y": -3.1965,
                    "cap": 90,
                    "services": ["22", "25"],
                    "dests": ["4212"],
                }
            ]
        }
    )

    stop = record.bus_stops[0]
    assert stop.latitude == pytest.approx(55.9521)
    assert stop.longitude == pytest.approx(-3.1965)
    assert stop.orientation == 90
    assert stop.services == ("22", "25")


def test_service_points_and_destinations():
    points = ServicePoints.model_validate(
        {
            "ref": "22",
            "operatorId": "LB",
            "servicePoints": [
                {"chainage": 0, "order": 1, "x": 55.95, "y": -3.19},
                {"chainage": 120, "order": 2, "x": 55.96, "y": -3.18},
            ],
        }
    )
    destinations = Destinations.model_validate(
        {"dests": [{"ref": "4212", "operatorId": "LB", "name": "Ocean Terminal", "direction": "R", "service": "22"}]}
    )

    assert [point.order for point in points.service_points] == [1, 2]
    assert destinations.destinations[0].direction is Direction.OUTBOUND


def test_journey_times_parse_clock_time(journey_times_payload):
    record = JourneyTimes.model_validate(journey_times_payload)

    stops = record.journey_times[0].journey_times
    assert stops[0].time == time(9, 34)
    assert stops[1].disruption is True


def test_diversions_and_points():
    diversions = Diversions.model_validate(
        {
            "diversions": [
                {
                    "ref": "DV1",
                    "diversionId": "117",
                    "operatorId": "LB",
                    "refService": "22",
                    "startStopId": "36232087",
                    "startStopName": "Princes Street",
                    "startDate": "2026-10-19T06:00:00Z",
                    "endStopId": "36232597",
                    "endStopName": "Ocean Terminal",
                    "endDate": "2026-10-26T23:00:00Z",
                    "days": "1111100",
                    "length": 1200,
                    "timeShift": 4,
                    "cancelledBusStops": [
                        {
                            "stopId": "36232088",
                            "stopName": "Waverley Bridge",
                            "replacedStopId": "36232099",
                            "replacedStopName": "Market Street",
                        }
                    ],
                    "temporaryBusStops": [
                        {"stopId": "T1", "stopName": "Temporary stop", "num": 1, "type": "N"}
                    ],
                }
            ]
        }
    )
    points = DiversionPoints.model_validate({"diversionPoints": [{"order": 1, "x": 55.9, "y": -3.2}]})

    diversion = diversions.diversions[0]
    assert diversion.diversion_id == "117"
    assert diversion.end_date > diversion.start_date
    assert diversion.cancelled_bus_stops[0].replaced_stop_name == "Market Street"
    assert diversion.temporary_bus_stops[0].stop_number == 1
    assert points.diversion_points[0].latitude == pytest.approx(55.9)


def test_stop_type_codes():
    assert StopType("D") is StopType.TERMINUS
    assert StopType("P") is StopType.PART_ROUTE


def test_timetable_defaults_to_all_operators():
    timetable = Timetable(stop_id="36232087", service_reference="22", destination_reference="4212")

    assert timetable.operator is Operator.ALL_OPERATORS

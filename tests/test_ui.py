import pytest

from obwire.errors import DecodeError
from obwire.ui import (
    Monitor,
    MonitorPosition,
    MonitorSize,
    parse_monitors,
    parse_studio_mode_enabled,
)

MONITOR = dict(
    monitorName="left",
    monitorIndex=1,
    monitorWidth=1024,
    monitorHeight=768,
    monitorPositionX=3,
    monitorPositionY=4,
)


def test_studio_mode_enabled():
    assert parse_studio_mode_enabled({"studioModeEnabled": True}) is True


def test_studio_mode_wrong_type():
    with pytest.raises(DecodeError):
        parse_studio_mode_enabled({"studioModeEnabled": "no"})


def test_monitor_list():
    monitors = parse_monitors({"monitors": [MONITOR]})
    assert monitors == [
        Monitor(
            name="left",
            index=1,
            size=MonitorSize(width=1024, height=768),
            position=MonitorPosition(x=3, y=4),
        )
    ]


def test_monitor_round_trip():
    assert Monitor.from_dict(MONITOR).to_dict() == MONITOR


def test_monitor_negative_position():
    monitor = Monitor.from_dict(dict(MONITOR, monitorPositionX=-1920))
    assert monitor.position.x == -1920


def test_monitor_width_out_of_range():
    with pytest.raises(DecodeError, match="u16"):
        Monitor.from_dict(dict(MONITOR, monitorWidth=70000))


def test_monitor_list_missing():
    with pytest.raises(DecodeError, match="monitors"):
        parse_monitors({})


def test_monitor_size_parts():
    assert MonitorSize.from_dict(MONITOR).to_dict() == dict(
        monitorWidth=1024, monitorHeight=768
    )
    assert MonitorPosition.from_dict(MONITOR).to_dict() == dict(
        monitorPositionX=3, monitorPositionY=4
    )
"""Root readers whose value is sampled from a function."""

from __future__ import annotations

from typing import Any, Callable

from lager.nodes import RootNode

__all__ = ["SensorNode", "Sensor", "make_sensor_node", "make_sensor"]


class SensorNode(RootNode):
    """Root node that samples its value from a function whenever recomputed."""

    def __init__(self, sensor: Callable[[], Any]) -> None:
        super().__init__(sensor())
        self._sensor = sensor

    def recompute(self) -> None:
        self.push_down(self._sensor())


def make_sensor_node(fn: Callable[[], Any]) -> SensorNode:
    """Create a sensor node sampling ``fn``."""
    return SensorNode(fn)


class Sensor:
    """A read-only cursor over a sensor node; a commit samples the function again."""

    def __init__(self, fn: Callable[[], Any]) -> None:
        self.node = make_sensor_node(fn)

    def get(self) -> Any:
        """Return the last propagated value."""
        return self.node.last


def make_sensor(fn: Callable[[], Any]) -> Sensor:
    """Create a sensor sampling ``fn``."""
    return Sensor(fn)
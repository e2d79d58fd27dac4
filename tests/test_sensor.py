from lager.sensor import Sensor, SensorNode, make_sensor, make_sensor_node


def test_initial_value_is_sampled():
    values = iter(["a", "b"])
    sensor = Sensor(lambda: next(values))
    assert sensor.get() == "a"


def test_commit_samples_again():
    values = iter(["a", "b"])
    sensor = make_sensor(lambda: next(values))
    seen = []
    sensor.node.connect(seen.append)
    sensor.node.send_down()
    sensor.node.notify()
    assert sensor.get() == "b"
    assert seen == ["b"]


def test_unchanged_sample_does_not_notify():
    sensor = make_sensor(lambda: "a")
    seen = []
    sensor.node.connect(seen.append)
    sensor.node.send_down()
    sensor.node.notify()
    assert seen == []
    assert sensor.get() == "a"


def test_sensor_node_recompute_updates_current():
    values = iter(["a", "b"])
    node = make_sensor_node(lambda: next(values))
    assert node.current == "a"
    node.recompute()
    assert node.current == "b"
    assert node.last == "a"


def test_sensor_node_refresh_does_not_sample():
    samples = iter(["a", "b"])
    node = SensorNode(lambda: next(samples))
    assert node.current == "a"
    node.refresh()
    assert node.current == "a"
    assert node.last == "a"
    node.recompute()
    assert node.current == "b"
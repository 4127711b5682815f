"""Unit tests for the in-memory host object model."""

from __future__ import annotations

import json
import unittest

from system.live_api import ObjectHandle, PropertyHandle, payload_value
from system.live_object import LiveObjectError, LiveObjectModel, PropertyEvent

DEVICE = "live_set tracks 0 devices 0"


class LiveObjectModelTests(unittest.TestCase):

    def setUp(self) -> None:
        self.model = LiveObjectModel()
        self.device_id = self.model.add_object(DEVICE, name="I/O Routing", level=1)
        self.model.alias("this_device", DEVICE)

    def test_alias_and_whitespace_resolve_to_canonical_path(self) -> None:
        self.assertEqual(self.model.canonical_path('this_device  midi_inputs 0'), f"{DEVICE} midi_inputs 0")
        self.assertEqual(self.model.canonical_path('"live_set"   tracks 0 devices 0'), DEVICE)
        self.assertTrue(self.model.exists("this_device"))
        self.assertEqual(self.model.object_id("this_device"), self.device_id)
        self.assertEqual(self.model.object_id("live_set tracks 9"), 0)

    def test_get_returns_json_payload(self) -> None:
        self.assertEqual(json.loads(self.model.get("this_device", "name")), {"name": "I/O Routing"})
        self.assertEqual(self.model.get("this_device", "missing"), "")
        self.assertEqual(self.model.get("live_set tracks 9", "name"), "")

    def test_read_returns_a_copy(self) -> None:
        self.model.add_object("live_set tracks 0", items=[1, 2])
        self.model.read("live_set tracks 0", "items").append(3)
        self.assertEqual(self.model.read("live_set tracks 0", "items"), [1, 2])

    def test_set_on_missing_object_raises(self) -> None:
        with self.assertRaises(LiveObjectError) as ctx:
            self.model.set("live_set tracks 9", "name", "x")
        self.assertIn("live_set tracks 9", str(ctx.exception))
        self.assertIsInstance(ctx.exception, KeyError)

    def test_observe_announces_id_then_value(self) -> None:
        events = []
        self.model.observe("this_device", "level", events.append)
        self.assertEqual(events, [PropertyEvent("id", self.device_id), PropertyEvent("level", 1)])

    def test_observe_missing_property_only_announces_id(self) -> None:
        events = []
        self.model.observe("this_device audio_inputs 0", "routing_type", events.append)
        self.assertEqual(events, [PropertyEvent("id", 0)])

    def test_set_notifies_observers_through_aliases(self) -> None:
        events = []
        self.model.observe("this_device", "level", events.append)
        self.model.set(DEVICE, "level", 5)
        self.assertEqual(events[-1], PropertyEvent("level", 5))

    def test_unsubscribe_stops_delivery(self) -> None:
        events = []
        unsubscribe = self.model.observe(DEVICE, "level", events.append)
        self.assertEqual(self.model.observer_count(DEVICE, "level"), 1)
        unsubscribe()
        self.model.set(DEVICE, "level", 3)
        self.assertEqual(len(events), 2)
        self.assertEqual(self.model.observer_count(DEVICE, "level"), 0)

    def test_nested_set_is_delivered_after_running_callback(self) -> None:
        order = []

        def on_level(event: PropertyEvent) -> None:
            if event.name != "level":
                return
            order.append(("level-start", event.value))
            if event.value == 2:
                self.model.set(DEVICE, "name", "changed")
            order.append(("level-end", event.value))

        def on_name(event: PropertyEvent) -> None:
            if event.name == "name":
                order.append(("name", event.value))

        self.model.observe(DEVICE, "level", on_level)
        self.model.observe(DEVICE, "name", on_name)
        order.clear()

        self.model.set(DEVICE, "level", 2)

        self.assertEqual(order, [("level-start", 2), ("level-end", 2), ("name", "changed")])

    def test_failing_observer_does_not_stop_others(self) -> None:
        events = []

        def broken(event: PropertyEvent) -> None:
            if event.name == "level":
                raise RuntimeError("boom")

        self.model.observe(DEVICE, "level", broken)
        self.model.observe(DEVICE, "level", events.append)
        self.model.set(DEVICE, "level", 7)
        self.assertEqual(events[-1], PropertyEvent("level", 7))


class HandleTests(unittest.TestCase):

    def setUp(self) -> None:
        self.model = LiveObjectModel()
        self.model.add_object("live_set tracks 1", has_midi_input=True)
        self.model.add_object("live_set tracks 1 devices 0 chains 0 devices 2", level=4)
        self.model.alias("this_device", "live_set tracks 1 devices 0 chains 0 devices 2")

    def test_payload_value_tolerates_junk(self) -> None:
        self.assertEqual(payload_value('{"a": 1}', "a"), 1)
        self.assertEqual(payload_value({"a": 1}, "a"), 1)
        self.assertEqual(payload_value("", "a", "d"), "d")
        self.assertEqual(payload_value("[1]", "a", "d"), "d")

    def test_property_handle_reads_and_writes(self) -> None:
        handle = PropertyHandle(self.model, "this_device", "level")
        self.assertEqual(handle.value(), 4)
        handle.set(6)
        self.assertEqual(handle.value(), 6)
        self.assertFalse(handle.observing)

    def test_property_handle_observe_replaces_previous_callback(self) -> None:
        first, second = [], []
        handle = PropertyHandle(self.model, "this_device", "level", first.append)
        handle.observe(second.append)
        handle.set(1)
        self.assertEqual(first[-1], PropertyEvent("level", 4))
        self.assertEqual(second[-1], PropertyEvent("level", 1))
        handle.close()
        self.assertFalse(handle.observing)

    def test_object_handle_walks_to_owning_track(self) -> None:
        handle = ObjectHandle(self.model, "this_device")
        self.assertEqual(handle.goto_owning_track(), "live_set tracks 1")
        self.assertTrue(handle.value("has_midi_input"))
        self.assertNotEqual(handle.id, 0)

    def test_object_handle_without_track(self) -> None:
        handle = ObjectHandle(self.model, "live_set tracks 5 devices 0")
        self.assertEqual(handle.id, 0)
        self.assertIsNone(handle.goto_owning_track())
        self.assertEqual(handle.path, "live_set tracks 5 devices 0")


if __name__ == "__main__":  # pragma: no cover
    unittest.main(exit=False)

from __future__ import annotations

import unittest

from trafficnotifications.models import U64_MAX
from trafficnotifications.presenter import EventPresenter, IconKind, get_flag_tooltip
from trafficnotifications.translations import Language, Translator
from trafficnotifications.units import ByteMultiple

from helpers import bytes_event, favorite_event, packets_event


class EventPresenterTests(unittest.TestCase):
    def setUp(self) -> None:
        self.presenter = EventPresenter(Translator(Language.EN))

    def test_packets_record(self) -> None:
        record = self.presenter.present(packets_event("T"))
        self.assertIs(record.icon_kind, IconKind.PACKETS_THRESHOLD)
        self.assertEqual(record.title_key, "packets_exceeded")
        self.assertEqual(record.title, "Packets threshold has been exceeded!")
        self.assertEqual(record.timestamp, "T")
        self.assertEqual(record.subtitle_lines, ["Threshold: 100 per second"])
        self.assertEqual(
            record.detail_lines,
            [
                "50 packets have been exchanged",
                " - Incoming: 40",
                " - Outgoing: 10",
            ],
        )
        self.assertIsNone(record.country)

    def test_bytes_record_scales_every_value(self) -> None:
        record = self.presenter.present(bytes_event())
        self.assertIs(record.icon_kind, IconKind.BYTES_THRESHOLD)
        self.assertEqual(record.title_key, "bytes_exceeded")
        self.assertEqual(record.subtitle_lines, ["Threshold: 1.0 MB per second"])
        self.assertEqual(
            record.detail_lines,
            [
                "2.0 KB have been exchanged",
                " - Incoming: 1.5 KB",
                " - Outgoing: 500 B",
            ],
        )

    def test_bytes_total_does_not_wrap(self) -> None:
        record = self.presenter.present(bytes_event(incoming=U64_MAX - 1, outgoing=1))
        expected_total = ByteMultiple.formatted_string(U64_MAX)
        self.assertEqual(record.detail_lines[0], f"{expected_total} have been exchanged")
        self.assertEqual(expected_total, "18446.7 PB")

    def test_bytes_total_beyond_u64(self) -> None:
        record = self.presenter.present(bytes_event(incoming=U64_MAX, outgoing=U64_MAX))
        self.assertEqual(
            record.detail_lines[0],
            f"{ByteMultiple.formatted_string(2 * U64_MAX)} have been exchanged",
        )

    def test_favorite_with_asn(self) -> None:
        record = self.presenter.present(favorite_event(asn_name="AS123 Example"))
        self.assertIs(record.icon_kind, IconKind.STAR)
        self.assertEqual(record.title_key, "favorite_transmitted")
        self.assertEqual(record.detail_lines, ["example.com - AS123 Example"])
        self.assertEqual(record.detail_lines[0].count("AS123 Example"), 1)
        self.assertEqual(record.country, "IT")
        self.assertEqual(record.traffic_stats.tot_packets(), 10)
        self.assertEqual(record.subtitle_lines, [])

    def test_favorite_without_asn(self) -> None:
        record = self.presenter.present(favorite_event(asn_name=""))
        self.assertEqual(record.detail_lines, ["example.com"])

    def test_flag_tooltip(self) -> None:
        record = self.presenter.present(favorite_event(country=""))
        self.assertEqual(record.flag_tooltip, "Unknown location\n10 packets\n1.5 KB")
        event = favorite_event()
        tooltip = get_flag_tooltip(event.host.country, event.host.traffic_stats, Translator())
        self.assertTrue(tooltip.startswith("IT\n"))

    def test_injected_formatter(self) -> None:
        presenter = EventPresenter(Translator(), format_bytes=lambda n: f"<{n}>")
        record = presenter.present(bytes_event())
        self.assertEqual(record.subtitle_lines, ["Threshold: <1000000> per second"])

    def test_unknown_event_type(self) -> None:
        with self.assertRaises(TypeError):
            self.presenter.present(object())  # type: ignore[arg-type]

    def test_italian_strings(self) -> None:
        record = EventPresenter(Translator(Language.IT)).present(packets_event())
        self.assertEqual(record.subtitle_lines, ["Soglia: 100 al secondo"])
        self.assertEqual(record.detail_lines[1], " - In entrata: 40")

    def test_to_dict(self) -> None:
        data = self.presenter.present(favorite_event()).to_dict()
        self.assertEqual(data["icon"], "star")
        self.assertEqual(data["traffic_stats"]["incoming_bytes"], 1_000)


if __name__ == "__main__":
    unittest.main()

import unittest
from datetime import datetime, timezone

from nmon2series.errors import ParseError
from nmon2series.model import Section
from nmon2series.normalize import collect_messages, extract_hostname, resolve_snapshots, split_top
from nmon2series.report import Report
from nmon2series.utils import remove_columns


class RemoveColumnsTestCase(unittest.TestCase):
    def test_removes_highest_index_first(self):
        cells = ["a", "b", "c", "d", "e"]
        self.assertEqual(remove_columns(cells, 1, 3), ["a", "c", "e"])
        self.assertEqual(remove_columns(cells, 3, 1), ["a", "c", "e"])
        self.assertEqual(cells, ["a", "b", "c", "d", "e"])

    def test_ignores_positions_past_short_row(self):
        self.assertEqual(remove_columns(["a", "b"], 0, 4), ["b"])


class HostnameTestCase(unittest.TestCase):
    def test_missing_host_leaves_empty_hostname(self):
        report = Report(sections={"AAA": Section(["key", "value"], [["progname", "nmon"]])})
        extract_hostname(report)
        self.assertEqual(report.hostname, "")
        self.assertIn("AAA", report.sections)

    def test_no_aaa_section(self):
        report = Report()
        extract_hostname(report)
        self.assertEqual(report.hostname, "")


class SnapshotTestCase(unittest.TestCase):
    def test_bad_times_are_skipped(self):
        zzzz = Section(
            ["snapshot", "time"],
            [
                ["T0001", "14:00:00,01-Jan-2020"],
                ["T0002", "not a time"],
                ["T0003"],
            ],
        )
        report = Report(sections={"ZZZZ": zzzz})
        resolve_snapshots(report)
        self.assertEqual(
            report.snapshots,
            {"T0001": datetime(2020, 1, 1, 14, 0, 0, tzinfo=timezone.utc)},
        )
        self.assertNotIn("ZZZZ", report.sections)


class TopTestCase(unittest.TestCase):
    def test_header_without_placeholder_is_used_as_is(self):
        top = Section(
            ["+PID", "Time", "PercentCPU", "Command"],
            [["1", "T0001", "5.0", "init"], ["2", "T0001", "1.0"]],
        )
        report = Report(sections={"TOP": top})
        split_top(report)
        self.assertEqual(list(report.sections), ["TOP.init"])
        self.assertEqual(report.sections["TOP.init"].header, ["Time", "PercentCPU"])
        self.assertEqual(report.sections["TOP.init"].rows, [["T0001", "5.0"]])

    def test_missing_command_column_is_an_error(self):
        top = Section(["+PID", "Time", "PercentCPU"], [["1", "T0001", "5.0"]])
        report = Report(sections={"TOP": top})
        with self.assertRaises(ParseError):
            split_top(report)

    def test_duplicate_pid_column_is_an_error(self):
        top = Section(["+PID", "+PID", "Command"], [["1", "2", "init"]])
        with self.assertRaises(ParseError):
            split_top(Report(sections={"TOP": top}))

    def test_placeholder_without_rows_is_dropped(self):
        top = Section(["PercentCPU Utilisation"], [])
        report = Report(sections={"TOP": top, "MEM": Section(["Memory", "free"])})
        split_top(report)
        self.assertEqual(list(report.sections), ["MEM"])


class MessagesTestCase(unittest.TestCase):
    def test_short_bbbp_rows_are_skipped(self):
        bbbp = Section(["line", "source", "value"], [["000", "/etc/release"], ["001", "uname", "Linux"]])
        report = Report(sections={"BBBP": bbbp, "MEM": Section(["Memory", "free"])})
        collect_messages(report)
        self.assertEqual(report.messages, {"BBBP_uname": "Linux\n"})
        self.assertEqual(list(report.sections), ["MEM"])


if __name__ == "__main__":
    unittest.main()

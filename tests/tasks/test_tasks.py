"""Tests for the Task model and status parsing."""

import os
import sys
import unittest
from datetime import datetime

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", ".."))

from TaskDock.tasks.enums import TaskStatus, TaskPriority
from TaskDock.tasks.models import Task, TaskAnnotation, parse_statuses


class TestEnums(unittest.TestCase):
    def test_status_parse_value_and_name(self):
        self.assertEqual(TaskStatus.parse("active"), TaskStatus.ACTIVE)
        self.assertEqual(TaskStatus.parse("WAITING"), TaskStatus.WAITING)
        self.assertEqual(TaskStatus.parse(" Completed "), TaskStatus.COMPLETED)
        self.assertIs(TaskStatus.parse(TaskStatus.DELETED), TaskStatus.DELETED)

    def test_status_parse_unknown_raises(self):
        with self.assertRaises(KeyError):
            TaskStatus.parse("blocked")

    def test_priority_parse(self):
        self.assertEqual(TaskPriority.parse("H"), TaskPriority.HIGH)
        self.assertEqual(TaskPriority.parse("m"), TaskPriority.MEDIUM)
        self.assertEqual(TaskPriority.parse("low"), TaskPriority.LOW)
        self.assertEqual(TaskPriority.parse(""), TaskPriority.NONE)
        self.assertEqual(TaskPriority.parse("NONE"), TaskPriority.NONE)
        self.assertEqual(TaskPriority.parse(None), TaskPriority.NONE)


class TestParseStatuses(unittest.TestCase):
    def test_none_and_blank_mean_all(self):
        self.assertEqual(parse_statuses(None), [])
        self.assertEqual(parse_statuses(""), [])
        self.assertEqual(parse_statuses(" , "), [])

    def test_comma_separated(self):
        self.assertEqual(
            parse_statuses("pending, ACTIVE"),
            [TaskStatus.PENDING, TaskStatus.ACTIVE],
        )

    def test_unknown_names_skipped(self):
        self.assertEqual(parse_statuses("pending,bogus,done"), [TaskStatus.PENDING])

    def test_duplicates_collapse(self):
        self.assertEqual(parse_statuses(["active", TaskStatus.ACTIVE]), [TaskStatus.ACTIVE])


class TestTask(unittest.TestCase):
    def test_defaults(self):
        task = Task(id="t1", title="Setup")
        self.assertEqual(task.status, TaskStatus.PENDING)
        self.assertEqual(task.priority, TaskPriority.NONE)
        self.assertIsNone(task.urgency)
        self.assertEqual(task.depends, [])

    def test_string_fields_coerced(self):
        task = Task(id="t1", title="Setup", status="active", priority="H")
        self.assertEqual(task.status, TaskStatus.ACTIVE)
        self.assertEqual(task.priority, TaskPriority.HIGH)

    def test_depends_duplicates_collapse(self):
        task = Task(id="t3", title="X", depends=["t1", "t2", "t1"])
        self.assertEqual(task.depends, ["t1", "t2"])

    def test_roundtrip(self):
        task = Task(
            id="t2",
            title="Schema",
            description="Create tables",
            status=TaskStatus.WAITING,
            priority=TaskPriority.MEDIUM,
            urgency=3.4,
            assignee="sam",
            project="Backend",
            due_date="2026-11-01",
            tags=["db"],
            annotations=[TaskAnnotation(entry=datetime(2026, 1, 2, 3, 4), description="note")],
            depends=["t1"],
            created_at=datetime(2026, 1, 1, 9, 0),
        )
        restored = Task.from_dict(task.to_dict())
        self.assertEqual(restored, task)

    def test_from_dict_minimal(self):
        task = Task.from_dict({"id": 7, "title": "Numeric id"})
        self.assertEqual(task.id, "7")
        self.assertEqual(task.tags, [])
        self.assertIsNone(task.created_at)

    def test_to_dict_uses_wire_values(self):
        d = Task(id="t1", title="X", status="active", priority="LOW").to_dict()
        self.assertEqual(d["status"], "active")
        self.assertEqual(d["priority"], "L")


class TestTaskLifecycle(unittest.TestCase):
    def setUp(self):
        self.task = Task(id="t1", title="Work", priority=TaskPriority.LOW)

    def test_start(self):
        self.task.start()
        self.assertEqual(self.task.status, TaskStatus.ACTIVE)
        self.assertEqual(self.task.annotations[-1].description, "Task started")
        # LOW 1.8 + ACTIVE 4
        self.assertAlmostEqual(self.task.urgency, 5.8, places=6)

    def test_stop_only_from_active(self):
        self.task.stop()
        self.assertEqual(self.task.status, TaskStatus.PENDING)
        self.assertEqual(self.task.annotations, [])

        self.task.start()
        self.task.stop()
        self.assertEqual(self.task.status, TaskStatus.PENDING)
        self.assertEqual(self.task.annotations[-1].description, "Task paused")

    def test_done(self):
        self.task.done()
        self.assertEqual(self.task.status, TaskStatus.COMPLETED)
        self.assertEqual(self.task.annotations[-1].description, "Task completed")
        self.assertIsNotNone(self.task.updated_at)

    def test_mark_deleted(self):
        self.task.mark_deleted()
        self.assertEqual(self.task.status, TaskStatus.DELETED)
        self.assertEqual(self.task.annotations[-1].description, "Task deleted")


if __name__ == "__main__":
    unittest.main()

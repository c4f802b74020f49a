# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Unit tests for record models."""

import unittest

from airtable_client.models.record import (
    DeletedRecord,
    DeletedRecordList,
    Record,
    RecordList,
    SelectResult,
)


class TestRecord(unittest.TestCase):
    def setUp(self):
        self.doc = {
            "id": "rec1",
            "fields": {"Name": "Ada", "Age": 36},
            "createdTime": "2024-01-01T00:00:00.000Z",
        }

    def test_from_dict(self):
        r = Record.from_dict(self.doc)
        self.assertEqual(r.id, "rec1")
        self.assertEqual(r.fields, {"Name": "Ada", "Age": 36})
        self.assertEqual(r.created_time, "2024-01-01T00:00:00.000Z")

    def test_from_dict_tolerates_missing_keys(self):
        r = Record.from_dict({"id": "rec2"})
        self.assertEqual(r.fields, {})
        self.assertIsNone(r.created_time)

    def test_dict_like_access(self):
        r = Record.from_dict(self.doc)
        self.assertEqual(r["Name"], "Ada")
        self.assertIn("Age", r)
        self.assertEqual(len(r), 2)
        self.assertEqual(list(r), ["Name", "Age"])
        r["Active"] = True
        self.assertTrue(r["Active"])
        del r["Active"]
        self.assertNotIn("Active", r)
        self.assertIsNone(r.get("Missing"))
        self.assertEqual(r.get("Missing", 0), 0)
        with self.assertRaises(KeyError):
            r["Missing"]

    def test_to_dict_round_trip(self):
        self.assertEqual(Record.from_dict(self.doc).to_dict(), self.doc)

    def test_to_dict_omits_unknown_created_time(self):
        self.assertEqual(Record("rec3", {"A": 1}).to_dict(), {"id": "rec3", "fields": {"A": 1}})


class TestCollections(unittest.TestCase):
    def test_record_list(self):
        rl = RecordList.from_dict({"records": [{"id": "a", "fields": {}}, {"id": "b", "fields": {}}]})
        self.assertEqual(len(rl), 2)
        self.assertEqual(rl[1].id, "b")
        self.assertEqual(rl.ids, ["a", "b"])

    def test_select_result_offset(self):
        page = SelectResult.from_dict({"records": [{"id": "a", "fields": {}}], "offset": "itr/rec"})
        self.assertEqual(page.offset, "itr/rec")
        self.assertTrue(page.has_more)
        self.assertIsInstance(page, RecordList)

    def test_select_result_last_page(self):
        page = SelectResult.from_dict({"records": []})
        self.assertIsNone(page.offset)
        self.assertFalse(page.has_more)
        self.assertEqual(len(page), 0)

    def test_deleted_records(self):
        one = DeletedRecord.from_dict({"id": "a", "deleted": True})
        self.assertEqual(one, DeletedRecord("a", True))
        many = DeletedRecordList.from_dict({"records": [{"id": "a", "deleted": True}, {"id": "b", "deleted": True}]})
        self.assertEqual(many.ids, ["a", "b"])
        self.assertTrue(all(r.deleted for r in many))


if __name__ == "__main__":
    unittest.main()

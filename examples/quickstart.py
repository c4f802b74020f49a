# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Walk through every records operation against a real table.

Reads AIRTABLE_API_KEY, AIRTABLE_BASE_ID and AIRTABLE_TABLE_NAME from the
environment. The table needs a single line text field "Name" and a number
field "Age". Records created here are deleted at the end.
"""

import sys
from pathlib import Path

# Add src to PYTHONPATH for local runs
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from airtable_client import AirtableClient, AirtableError, SortSpec


def log_call(call: str) -> None:
    print({"call": call})


def main() -> int:
    created = None
    with AirtableClient(use_env=True) as client:
        try:
            log_call("client.create([...], {'typecast': True})")
            created = client.create(
                [{"Name": "Foo", "Age": 20}, {"Name": "Bar", "Age": 15}],
                {"typecast": True},
            )
            print({"created": created.ids})

            log_call("client.select(...)")
            page = client.select(
                fields=["Name", "Age"],
                max_records=20,
                sort=[SortSpec("Name", "asc"), SortSpec("Age", "desc")],
            )
            for record in page:
                print({"id": record.id, "Name": record.get("Name"), "Age": record.get("Age")})
            print({"offset": page.offset})

            first = created[0].id
            log_call(f"client.find({first!r})")
            print(client.find(first).to_dict())

            log_call("client.update(id, fields)")
            print(client.update(first, {"Age": 30}).to_dict())

            log_call("client.update([...]) batch")
            batch = client.update([{"id": r.id, "fields": {"Age": 99}} for r in created])
            print({"updated": batch.ids})

            log_call("client.replace(id, fields)")
            print(client.replace(first, {"Name": "Replaced"}).to_dict())

            log_call("client.select_dataframe(...)")
            print(client.select_dataframe(filter_by_formula="{Age}=99").head())
        except AirtableError as ex:
            print({"error": ex.to_dict()})
            return 1
        finally:
            if created is not None:
                log_call("client.delete([...])")
                print({"deleted": client.delete(created.ids).ids})
    return 0


if __name__ == "__main__":
    sys.exit(main())

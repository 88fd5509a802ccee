import json
from importlib import resources

import jsonschema


def test_layout_schema_validation() -> None:
    root = resources.files("parkinggrid.layouts")
    schema = json.loads((root / "layout.schema.json").read_text(encoding="utf-8"))
    checked = 0
    for entry in root.iterdir():
        if not entry.name.endswith(".json") or entry.name == "layout.schema.json":
            continue
        data = json.loads(entry.read_text(encoding="utf-8"))
        jsonschema.validate(instance=data, schema=schema)
        checked += 1
    assert checked == 3
